from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from github_content.errors import DecodeError


class CommitDescriptor(BaseModel):
    """
    One entry of the `commits` array GitHub sends with a push event.

    Only the revision and the modified paths matter here; anything else in
    the entry (added, removed, author, message, ...) is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    modified: List[str] = []

    @property
    def revision_id(self) -> str:
        return self.id

    @property
    def modified_paths(self) -> List[str]:
        return list(self.modified)


_COMMITS = TypeAdapter(List[CommitDescriptor])


def decode_commits(raw: str) -> List[CommitDescriptor]:
    """
    Parse the commit payload string into a new list of CommitDescriptor.

    Raises DecodeError when the string is not JSON or not an array of
    commit objects. An empty array is valid.
    """
    try:
        return _COMMITS.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"error in decoding commit payload: {e}") from e


__all__ = ["CommitDescriptor", "decode_commits"]

import logging

import pytest

from github_content.config import PipelineConfig
from github_content.errors import FetchError
from github_content.ingest.fetch import GithubContentClient
from github_content.ingest.pipeline import matches_suffix, run_pipeline
from github_content.payload import decode_commits

from tests.doubles import FakeContentClient, FakeResponse, FakeSession

log = logging.getLogger("test-pipeline")


def make_config(folder, extensions=("obo",)):
    return PipelineConfig(
        owner="org",
        repository="repo",
        output_folder=folder,
        file_extensions=tuple(extensions),
    )


@pytest.mark.parametrize(
    "path, suffixes, expected",
    [
        ("src/a.obo", "obo", True),
        ("src/a.OBO", "obo", False),
        ("src/a.obo.bak", "obo", False),
        # plain substring-at-end, no extension boundary
        ("src/jumbo", "obo", False),
        ("src/hobo", "obo", True),
        ("src/a.owl", ("obo", "owl"), True),
        ("src/a.txt", ("obo", "owl"), False),
    ],
)
def test_matches_suffix(path, suffixes, expected):
    assert matches_suffix(path, suffixes) is expected


def test_push_scenario_downloads_only_matching_file(tmp_path, caplog):
    commits = decode_commits('[{"id":"abc123","modified":["src/a.obo","src/b.txt"]}]')
    client = FakeContentClient(files={("src/a.obo", "abc123"): b"[Term]\nid: X:1\n"})

    with caplog.at_level(logging.DEBUG, logger="test-pipeline"):
        written = run_pipeline(commits, make_config(tmp_path), client, log)

    assert client.calls == [("org", "repo", "src/a.obo", "abc123")]
    assert written == [tmp_path / "a.obo"]
    assert (tmp_path / "a.obo").read_bytes() == b"[Term]\nid: X:1\n"
    assert not (tmp_path / "b.txt").exists()
    assert "skipped file src/b.txt from downloading" in caplog.messages


@pytest.mark.parametrize("raw", ["[]", '[{"id": "abc123", "modified": []}]'])
def test_nothing_to_do(tmp_path, raw):
    client = FakeContentClient()

    written = run_pipeline(decode_commits(raw), make_config(tmp_path), client, log)

    assert written == []
    assert client.calls == []
    assert list(tmp_path.iterdir()) == []


def test_each_path_fetched_at_its_own_commit(tmp_path):
    commits = decode_commits(
        '[{"id":"r1","modified":["a.obo","x.txt"]},'
        ' {"id":"r2","modified":["b.obo","c.obo"]}]'
    )
    client = FakeContentClient()

    written = run_pipeline(commits, make_config(tmp_path), client, log)

    assert client.calls == [
        ("org", "repo", "a.obo", "r1"),
        ("org", "repo", "b.obo", "r2"),
        ("org", "repo", "c.obo", "r2"),
    ]
    assert [p.name for p in written] == ["a.obo", "b.obo", "c.obo"]
    assert (tmp_path / "b.obo").read_bytes() == b"b.obo@r2"


def test_rerun_is_idempotent(tmp_path):
    commits = decode_commits('[{"id":"abc123","modified":["src/a.obo"]}]')
    config = make_config(tmp_path)

    run_pipeline(commits, config, FakeContentClient(), log)
    first = (tmp_path / "a.obo").read_bytes()
    run_pipeline(commits, config, FakeContentClient(), log)

    assert (tmp_path / "a.obo").read_bytes() == first
    assert [p.name for p in tmp_path.iterdir()] == ["a.obo"]


def test_fetch_failure_aborts_and_keeps_earlier_files(tmp_path):
    commits = decode_commits(
        '[{"id":"r1","modified":["a.obo","b.obo","c.obo"]}]'
    )
    client = FakeContentClient(fail_on="b.obo")

    with pytest.raises(FetchError):
        run_pipeline(commits, make_config(tmp_path), client, log)

    assert [c[2] for c in client.calls] == ["a.obo", "b.obo"]
    assert (tmp_path / "a.obo").exists()
    assert not (tmp_path / "c.obo").exists()


def test_multiple_extensions(tmp_path):
    commits = decode_commits('[{"id":"r1","modified":["a.obo","b.owl","c.txt"]}]')
    client = FakeContentClient()

    written = run_pipeline(commits, make_config(tmp_path, ("obo", "owl")), client, log)

    assert [p.name for p in written] == ["a.obo", "b.owl"]


def test_corrupt_content_stops_run_without_writing(tmp_path):
    commits = decode_commits('[{"id":"abc123","modified":["src/a.obo"]}]')
    session = FakeSession(
        FakeResponse(200, {"type": "file", "encoding": "base64", "content": "!!!!"})
    )
    client = GithubContentClient(session=session)

    with pytest.raises(FetchError):
        run_pipeline(commits, make_config(tmp_path), client, log)

    assert not (tmp_path / "a.obo").exists()


def test_empty_suffix_matches_every_path(tmp_path):
    commits = decode_commits('[{"id":"r1","modified":["a.obo","b.txt"]}]')
    client = FakeContentClient()

    written = run_pipeline(commits, make_config(tmp_path, ("",)), client, log)

    assert [p.name for p in written] == ["a.obo", "b.txt"]

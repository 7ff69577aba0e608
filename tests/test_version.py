import pytest

from jiractl import version


def test_info_without_commit_date(monkeypatch):
    monkeypatch.setattr(version, "SOURCE_DATE_EPOCH", "-1")
    out = version.info()
    assert 'CommitDate=""' in out
    assert out.startswith("(Version=")
    assert out.endswith(")")


def test_info_epoch_zero(monkeypatch):
    monkeypatch.setattr(version, "SOURCE_DATE_EPOCH", "0")
    assert 'CommitDate="1970-01-01T00:00:00+00:00"' in version.info()


def test_info_contains_fields(monkeypatch):
    monkeypatch.setattr(version, "VERSION", "v1.2.3")
    monkeypatch.setattr(version, "GIT_COMMIT", "abc123")
    out = version.info()
    assert 'Version="v1.2.3"' in out
    assert 'GitCommit="abc123"' in out
    assert f'Platform="{version.PLATFORM}"' in out


def test_info_invalid_epoch(monkeypatch):
    monkeypatch.setattr(version, "SOURCE_DATE_EPOCH", "not-a-number")
    with pytest.raises(ValueError):
        version.info()
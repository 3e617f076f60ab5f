"""Git commit collector - reads release commits from a local repo."""

from __future__ import annotations

import subprocess
from pathlib import Path

from prfix.models import CommitRecord, Release

# Git log format: NUL-delimited fields to avoid escaping issues.
# %H  = commit hash
# %an = author name
# %ae = author email
# %aI = author date ISO 8601
# %s  = subject (first line of commit message)
# %b  = body
# Body is last to allow newlines.
GIT_LOG_FIELDS = ("hash", "author_name", "author_email", "timestamp", "subject", "body")
GIT_LOG_FORMAT = "%H%x00%an%x00%ae%x00%aI%x00%s%x00%b"

# Separator to split commits - unlikely to appear in commit messages
COMMIT_SEP = "---PRFIX_COMMIT_SEP---"


class GitCollector:
    def __init__(self, repo_path: Path) -> None:
        self._repo = repo_path

    def collect(self, since: str | None = None, until: str = "HEAD") -> list[CommitRecord]:
        """Commits reachable from ``until`` but not from ``since``, newest first."""
        self._check_repo()
        rev_range = f"{since}..{until}" if since else until
        cmd = ["git", "log", f"--format={COMMIT_SEP}{GIT_LOG_FORMAT}", rev_range]
        output = self._run_cmd(cmd)
        return [self._to_record(c) for c in self._parse_log_output(output)]

    def last_tag(self, prefix: str = "v") -> Release | None:
        """Most recent tag reachable from HEAD that starts with the prefix."""
        self._check_repo()
        cmd = ["git", "describe", "--tags", "--abbrev=0", f"--match={prefix}*"]
        tag = self._run_cmd(cmd).strip()
        if not tag:
            return None
        head = self._run_cmd(["git", "rev-list", "-n", "1", tag]).strip()
        return Release(version=tag[len(prefix) :], git_tag=tag, git_head=head)

    def _check_repo(self) -> None:
        if not (self._repo / ".git").exists():
            msg = f"Not a git repository: {self._repo}"
            raise FileNotFoundError(msg)

    @staticmethod
    def _to_record(commit: dict[str, str]) -> CommitRecord:
        """Full message is subject plus body; the remaining fields are opaque."""
        subject = commit["subject"]
        body = commit["body"]
        message = f"{subject}\n\n{body}" if body else subject
        extra = {k: v for k, v in commit.items() if k not in ("subject", "body")}
        extra["body"] = body
        return CommitRecord(message=message, subject=subject, extra=extra)

    def _parse_log_output(self, output: str) -> list[dict[str, str]]:
        """Parse git log output with commit separator."""
        commits = []
        for chunk in output.split(COMMIT_SEP):
            chunk = chunk.strip()
            if not chunk:
                continue
            parsed = self._parse_single_commit(chunk)
            if parsed:
                commits.append(parsed)
        return commits

    def _parse_single_commit(self, raw: str) -> dict[str, str] | None:
        """Parse a single commit from NUL-delimited fields."""
        parts = raw.split("\x00")
        if len(parts) < len(GIT_LOG_FIELDS):
            return None
        return {field: parts[i].strip() for i, field in enumerate(GIT_LOG_FIELDS)}

    def _run_cmd(self, cmd: list[str]) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                cmd,
                cwd=self._repo,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=30,
            )
            return result.stdout or ""
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
            return ""

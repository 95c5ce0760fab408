from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json
import pytest

from velu_pages import cli
from velu_pages.builder import SiteBuilder
from velu_pages.config import BuildOptions, SiteConfigError
from velu_pages.linting import lint_site
from velu_pages.scaffold import STARTER_DOCUMENT, STARTER_PAGES, init_project


def test_init_project_writes_starter_files(tmp_path: Path) -> None:
    written = init_project(tmp_path / "site")
    assert written[0] == tmp_path / "site" / "docs.json"
    assert len(written) == 1 + len(STARTER_PAGES)
    assert msgspec.json.decode(written[0].read_bytes()) == STARTER_DOCUMENT


def test_starter_project_lints_clean(tmp_path: Path) -> None:
    init_project(tmp_path)
    report = lint_site(tmp_path)
    assert report.valid, f"starter project should lint clean, got {report.errors!r}"


def test_starter_project_builds(tmp_path: Path) -> None:
    docs = tmp_path / "docs"
    init_project(docs)
    report = SiteBuilder(BuildOptions(docs_dir=docs, output_dir=tmp_path / "out")).rebuild()
    assert report.missing == []
    assert report.first_page == "getting-started/guides/configuration"
    meta = msgspec.json.decode(
        (tmp_path / "out" / "content" / "docs" / "getting-started" / "meta.json").read_bytes()
    )
    assert meta["pages"] == [
        "guides",
        "quickstart",
        "installation",
        "---Resources---",
        "[Velu Website](https://getvelu.com)",
    ]


@pytest.mark.parametrize("existing", ["docs.json", "velu.json"])
def test_init_project_refuses_to_overwrite(tmp_path: Path, existing: str) -> None:
    (tmp_path / existing).write_text("{}", encoding="utf-8")
    with pytest.raises(SiteConfigError, match="already exists"):
        init_project(tmp_path)


def test_cli_init_and_build_print_written_paths(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    docs = tmp_path / "docs"
    cli.init(target_dir=docs)
    out = capsys.readouterr().out
    assert f"wrote {docs / 'docs.json'}" in out

    cli.build(docs_dir=docs, output_dir=tmp_path / "out")
    out = capsys.readouterr().out
    page = tmp_path / "out" / "content" / "docs" / "getting-started" / "quickstart.mdx"
    assert f"wrote {page}" in out, f"expected build to list {page}, got {out!r}"


def test_cli_build_lists_missing_pages_on_stderr(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "docs.json").write_bytes(
        msgspec.json.encode({"navigation": {"pages": ["ghost"]}})
    )
    cli.build(docs_dir=tmp_path, output_dir=tmp_path / "out")
    assert "missing ghost (en)" in capsys.readouterr().err


def test_cli_lint_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    init_project(tmp_path)
    cli.lint(docs_dir=tmp_path)
    assert "Navigation is valid" in capsys.readouterr().out


def test_cli_lint_failure_exits_non_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "docs.json").write_bytes(
        msgspec.json.encode({"navigation": {"pages": ["ghost"]}})
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.lint(docs_dir=tmp_path)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Validation failed:" in err
    assert "Missing page: ghost.mdx or ghost.md" in err


def test_main_invokes_app(mocker: typ.Any) -> None:
    app = mocker.patch.object(cli, "app")
    cli.main()
    app.assert_called_once_with()

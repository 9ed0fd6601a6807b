from pathlib import Path

import infra.utils.version as version_module


def test_get_version_reads_root_version_file(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "version.py").write_text('__version__ = "9.8.7"\n')
    monkeypatch.setattr(version_module, "__file__", str(tmp_path / "src" / "infra" / "utils" / "version.py"))

    assert version_module.get_version() == "9.8.7"


def test_get_version_falls_back_to_distribution_metadata(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(version_module, "__file__", str(tmp_path / "src" / "infra" / "utils" / "version.py"))
    monkeypatch.setattr(version_module, "version", lambda _: "2.0.0")

    assert version_module.get_version() == "2.0.0"


def test_get_version_defaults_when_nothing_is_available(monkeypatch, tmp_path: Path) -> None:
    def missing(_: str) -> str:
        raise version_module.PackageNotFoundError

    monkeypatch.setattr(version_module, "__file__", str(tmp_path / "src" / "infra" / "utils" / "version.py"))
    monkeypatch.setattr(version_module, "version", missing)

    assert version_module.get_version() == version_module.DEFAULT_VERSION

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

VARIANTS_DIR = Path(__file__).resolve().parent / "manifests" / "variants"
DEFAULT_VARIANT = "config"


def _mode(value: Any) -> Optional[int]:
    # Manifests quote modes ("0750"); an unquoted 0750 arrives as an int from YAML 1.1.
    if value is None:
        return None
    if isinstance(value, int):
        return value
    return int(str(value), 8)


def _str_list(value: Any) -> List[str]:
    return [str(v).strip() for v in (value or []) if str(v).strip()]


@dataclass(frozen=True)
class ToolGroup:
    label: str
    packages: List[str]


@dataclass(frozen=True)
class DownstreamLog:
    path: Path
    mode: int
    owner: Optional[str]
    group: Optional[str]


@dataclass(frozen=True)
class Variant:
    """A bootstrap flavour, declared in manifests/variants/<name>.yaml."""

    raw: Dict[str, Any]

    @property
    def name(self) -> str:
        return str(self.raw.get("name") or DEFAULT_VARIANT)

    @property
    def log_prefix(self) -> str:
        return str(self.raw.get("log_prefix") or "bootstrap")

    @property
    def title(self) -> str:
        return str(self.raw.get("title") or "SOC2 Bootstrap Script")

    @property
    def actions(self) -> List[str]:
        return _str_list(self.raw.get("actions"))

    @property
    def needs(self) -> List[str]:
        return _str_list(self.raw.get("needs"))

    @property
    def packages(self) -> List[str]:
        return _str_list(self.raw.get("packages"))

    @property
    def package_sources(self) -> List[str]:
        return _str_list(self.raw.get("package_sources"))

    @property
    def tool_groups(self) -> List[ToolGroup]:
        groups = self.raw.get("tool_packages") or []
        if not isinstance(groups, list):
            raise ValueError("tool_packages must be a list of {label, packages}")
        return [
            ToolGroup(label=str(g.get("label") or "tools"), packages=_str_list(g.get("packages")))
            for g in groups
        ]

    @property
    def required_tools(self) -> List[str]:
        return _str_list(self.raw.get("required_tools")) or ["git"]

    @property
    def version_probe(self) -> List[str]:
        return _str_list(self.raw.get("version_probe"))

    @property
    def git_host(self) -> str:
        return str(self.raw.get("git_host") or "github.com")

    @property
    def git_user(self) -> str:
        return str(self.raw.get("git_user") or "git")

    @property
    def deploy_key_file(self) -> str:
        return str(self.raw.get("deploy_key_file") or "github_deploy_key")

    @property
    def repo_url(self) -> Optional[str]:
        url = (self.raw.get("repository") or {}).get("url")
        return str(url) if url else None

    @property
    def repo_example(self) -> str:
        example = (self.raw.get("repository") or {}).get("example")
        return str(example or f"{self.git_user}@{self.git_host}:org/repo.git")

    @property
    def destination(self) -> Path:
        dest = (self.raw.get("repository") or {}).get("destination")
        if not dest:
            raise ValueError(f"variant {self.name}: repository.destination is required")
        return Path(str(dest))

    @property
    def destination_mode(self) -> Optional[int]:
        return _mode((self.raw.get("permissions") or {}).get("destination_mode"))

    @property
    def script_pattern(self) -> str:
        return str((self.raw.get("permissions") or {}).get("script_pattern") or "*.sh")

    @property
    def script_dirs(self) -> List[str]:
        return _str_list((self.raw.get("permissions") or {}).get("script_dirs"))

    @property
    def playbook_pattern(self) -> Optional[str]:
        pattern = (self.raw.get("permissions") or {}).get("playbook_pattern")
        return str(pattern) if pattern else None

    @property
    def playbook_mode(self) -> Optional[int]:
        return _mode((self.raw.get("permissions") or {}).get("playbook_mode"))

    @property
    def downstream_log(self) -> Optional[DownstreamLog]:
        d = self.raw.get("downstream_log")
        if not d:
            return None
        return DownstreamLog(
            path=Path(str(d["path"])),
            mode=_mode(d.get("mode")) or 0o640,
            owner=d.get("owner"),
            group=d.get("group"),
        )

    @property
    def next_steps(self) -> List[str]:
        return [str(s).format(destination=self.destination) for s in (self.raw.get("next_steps") or [])]

    def with_overrides(self, **raw: Any) -> "Variant":
        return Variant(raw={**self.raw, **raw})


def load_variant_file(path: str | Path) -> Variant:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(path))

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("variant manifest must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read variant manifests") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Variant manifest must be a mapping/dict: {p}")
    return Variant(raw=raw)


def available_variants() -> List[str]:
    return sorted(p.stem for p in VARIANTS_DIR.glob("*.yaml"))


def load_variant(name: str = DEFAULT_VARIANT) -> Variant:
    p = VARIANTS_DIR / f"{name}.yaml"
    if not p.exists():
        raise ValueError(f"Unknown variant {name!r} (available: {', '.join(available_variants())})")
    return load_variant_file(p)

"""Copy the built ppx executable from the build tree to the project root."""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
MARKER_SUFFIX = ".opam"
ARTIFACT_NAME = "ppx.exe"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=PROJECT_ROOT)
    parser.add_argument("--marker-suffix", default=MARKER_SUFFIX)
    parser.add_argument("--artifact", default=ARTIFACT_NAME)
    return parser.parse_args(argv)


def find_project_name(root: Path, suffix: str = MARKER_SUFFIX) -> str | None:
    """Derive the project name from a top-level marker file; last match wins."""
    candidates: list[str] = []
    for name in sorted(entry.name for entry in root.iterdir()):
        if not name.endswith(suffix):
            continue
        stem = name[: -len(suffix)]
        if stem:
            candidates.append(stem)

    if not candidates:
        return None
    if len(candidates) > 1:
        print(
            f"[copy-ppx] Multiple {suffix} files found ({', '.join(candidates)}); using {candidates[-1]}",
            file=sys.stderr,
        )
    return candidates[-1]


def artifact_paths(root: Path, project_name: str, artifact: str = ARTIFACT_NAME) -> tuple[Path, Path]:
    src = root / "build" / "lib" / project_name / artifact
    dst = root / artifact
    return src, dst


def copy_artifact(src: Path, dst: Path) -> None:
    shutil.copy2(src, dst)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    root = args.root.resolve()

    project_name = find_project_name(root, args.marker_suffix)
    if project_name is None:
        raise SystemExit(f"Cannot find `{args.marker_suffix}` file in top level.")

    src, dst = artifact_paths(root, project_name, args.artifact)
    print(f"[copy-ppx] Copying {src} to {dst}...", flush=True)
    copy_artifact(src, dst)


if __name__ == "__main__":
    main()

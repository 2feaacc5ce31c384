from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from docnav.ingest import DEFAULT_PATTERN, CatalogConfig, MarkdownCatalog
from docnav.models.configs import NavigationConfig
from docnav.navigation import (
    FolderConfig,
    OrderResolver,
    SidebarStateMachine,
    build_tree,
    iter_folders,
    render_sidebar,
    to_dicts,
)
from docnav.orchestration import load_navigation_config


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Render the documentation sidebar for a docs directory.")
    parser.add_argument(
        "docs_dir",
        type=Path,
        nargs="?",
        default=None,
        help="Directory containing markdown documents (default: $DOCS_DIR, docs_dir from --folders, or ./docs)",
    )
    parser.add_argument(
        "--pattern",
        default=None,
        help="Glob pattern for documents (default: $DOCS_PATTERN, pattern from --folders, or **/*.md)",
    )
    parser.add_argument(
        "--folders",
        type=Path,
        default=Path(os.environ["NAV_FOLDERS_FILE"]) if os.getenv("NAV_FOLDERS_FILE") else None,
        help="Optional YAML/TOML/JSON navigation config with folder display names and order",
    )
    parser.add_argument("--active", default=None, help="Slug of the active document")
    parser.add_argument(
        "--toggle",
        action="append",
        default=[],
        metavar="PATH",
        help="Folder path to toggle after initialisation; may be repeated",
    )
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "WARNING"))
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    nav_config = load_navigation_config(args.folders) if args.folders else NavigationConfig()
    env_docs_dir = Path(os.environ["DOCS_DIR"]) if os.getenv("DOCS_DIR") else None
    docs_dir = args.docs_dir or env_docs_dir or nav_config.docs_dir or Path("docs")
    pattern = args.pattern or os.getenv("DOCS_PATTERN") or nav_config.pattern or DEFAULT_PATTERN
    if not docs_dir.exists():
        raise FileNotFoundError(f"Docs directory not found: {docs_dir}")

    catalog = MarkdownCatalog(docs_dir, CatalogConfig(pattern=pattern))
    result = build_tree(catalog.scan())
    resolver = OrderResolver(FolderConfig.from_navigation_config(nav_config))

    machine = SidebarStateMachine(args.active)
    known = frozenset(folder.path for folder in iter_folders(result.root))
    for path in args.toggle:
        machine.toggle(path, known)

    items = render_sidebar(result.root, machine.state, machine.active_slug, resolver)
    print(
        json.dumps(
            {
                "active": machine.active_slug,
                "expanded": sorted(machine.state),
                "items": to_dicts(items),
                "issues": [issue.to_public_dict() for issue in result.issues],
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()

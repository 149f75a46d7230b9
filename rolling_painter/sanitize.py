from __future__ import annotations

import json
import re
from pathlib import Path

# Nested repo setup from github-painter templates; painting should happen in the caller's repo.
SETUP_COMMAND_RULES: list[tuple[str, str]] = [
    (r"^mkdir\s+github_painter.*$", ""),
    (r"^cd\s+github_painter.*$", ""),
    (r"^git\s+init.*$", ""),
    (r"^git\s+remote\s+add\s+origin.*$", ""),
    (r"^git\s+pull\s+origin.*$", ""),
]


def load_rules(rules_path: Path | None) -> list[tuple[str, str]]:
    """Extra rules from a JSON list: [["<regex>", "<replacement>"], ...]. Missing file -> []."""
    if not rules_path or not rules_path.exists():
        return []

    obj = json.loads(rules_path.read_text(encoding="utf-8"))
    if not isinstance(obj, list):
        raise ValueError(f"Strip rules must be a JSON list of [regex, replacement] pairs: {rules_path}")

    rules: list[tuple[str, str]] = []
    for item in obj:
        if not (isinstance(item, (list, tuple)) and len(item) == 2):
            continue
        patt, repl = item
        rules.append((str(patt), str(repl)))
    return rules


def strip_setup_commands(text: str, rules_path: Path | None = None) -> str:
    """Blank out setup lines (the newline stays), then apply optional extra rules in order."""
    out = text
    for patt, repl in SETUP_COMMAND_RULES + load_rules(rules_path):
        out = re.sub(patt, repl, out, flags=re.MULTILINE)
    return out

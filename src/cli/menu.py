"""Load and validate the YAML menu definition. Used by the command loop."""

from pathlib import Path

import yaml

ACTIONS = ("add", "search", "list", "save_and_exit")

REQUIRED_MESSAGES = (
    "ask_name",
    "ask_phone",
    "ask_email",
    "ask_search_name",
    "required_fields",
    "contact_added",
    "contact_not_found",
    "no_contacts",
    "contacts_header",
    "save_error",
    "goodbye",
    "invalid_option",
)


def get_menu_path() -> Path:
    """Return path to the packaged menu YAML (menu.yaml next to this module)."""
    return Path(__file__).resolve().parent / "menu.yaml"


def load_menu(path: Path | None = None) -> dict:
    """Load menu YAML and return the menu dict. Validates structure."""
    if path is None:
        path = get_menu_path()
    raw = path.read_text(encoding="utf-8")
    menu = yaml.safe_load(raw)
    if not isinstance(menu, dict):
        raise ValueError("Menu YAML must be a dict")
    if not menu.get("title"):
        raise ValueError("Menu must have a 'title'")
    options = menu.get("options")
    if not options or not isinstance(options, list):
        raise ValueError("Menu must have a non-empty 'options' list")
    keys = set()
    exits = 0
    for option in options:
        if not isinstance(option, dict):
            raise ValueError("Every option must be a mapping")
        key = option.get("key")
        if key is None or str(key).strip() == "":
            raise ValueError("Every option must have 'key'")
        key = str(key).strip()
        if key in keys:
            raise ValueError(f"Duplicate option key '{key}'")
        keys.add(key)
        option["key"] = key
        if not option.get("label"):
            raise ValueError(f"Option '{key}' must have 'label'")
        action = option.get("action")
        if action not in ACTIONS:
            raise ValueError(f"Option '{key}' has unknown action '{action}'")
        if action == "save_and_exit":
            exits += 1
    if exits != 1:
        raise ValueError("Menu must have exactly one 'save_and_exit' option")
    messages = menu.get("messages") or {}
    missing = [m for m in REQUIRED_MESSAGES if m not in messages]
    if missing:
        raise ValueError(f"Menu is missing messages: {', '.join(missing)}")
    menu["messages"] = messages
    menu.setdefault("prompt", "> ")
    return menu


def render_menu(menu: dict) -> str:
    """Return the menu block as shown before each prompt."""
    lines = [menu["title"]]
    for option in menu["options"]:
        lines.append(f"{option['key']}. {option['label']}")
    return "\n".join(lines)


def action_for(menu: dict, choice: str) -> str | None:
    """Return the action bound to a typed choice, or None if no option matches."""
    choice = (choice or "").strip()
    for option in menu["options"]:
        if option["key"] == choice:
            return option["action"]
    return None

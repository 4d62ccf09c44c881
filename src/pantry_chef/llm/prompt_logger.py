"""
Pantry Chef - Prompt Logger.

Logs chat-completion prompts and raw replies to files for debugging.
Enabled via PANTRY_LOG_PROMPTS=1 or the --log-prompts CLI flag.
"""

from datetime import datetime
from pathlib import Path

from pantry_chef.config import get_core_settings

LOG_DIR = Path("prompt_logs")

# None means "follow settings"; the CLI flag overrides it
_enabled_override: bool | None = None

# Session tracking
_session_id: str | None = None
_call_counter: int = 0


def enable_prompt_logging(enabled: bool = True) -> None:
    """Enable or disable prompt logging for this process."""
    global _enabled_override
    _enabled_override = enabled


def is_prompt_logging_enabled() -> bool:
    if _enabled_override is not None:
        return _enabled_override
    return get_core_settings().pantry_log_prompts


def _get_session_id() -> str:
    """Get or create a session ID for this run."""
    global _session_id
    if _session_id is None:
        _session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    return _session_id


def _get_session_dir() -> Path:
    session_dir = LOG_DIR / _get_session_id()
    session_dir.mkdir(parents=True, exist_ok=True)
    return session_dir


def log_prompt(
    *,
    model: str,
    system_prompt: str,
    user_prompt: str,
    response: str | None = None,
    error: str | None = None,
) -> Path | None:
    """
    Log a prompt and its raw reply to a markdown file.

    Returns:
        Path to the log file, or None if logging is disabled
    """
    if not is_prompt_logging_enabled():
        return None

    global _call_counter
    _call_counter += 1

    filepath = _get_session_dir() / f"{_call_counter:02d}_generate_recipes.md"

    content = f"""# LLM Call: generate_recipes

**Time:** {datetime.now().isoformat()}
**Model:** {model}

---

## System Prompt

```
{system_prompt}
```

---

## User Prompt

```
{user_prompt}
```

---

## Response

"""

    if error:
        content += f"**ERROR:** {error}\n"
    elif response:
        content += f"```\n{response}\n```\n"
    else:
        content += "(No content)\n"

    filepath.write_text(content, encoding="utf-8")
    return filepath


def get_session_log_dir() -> Path | None:
    """Get the current session's log directory, if logging is enabled."""
    if not is_prompt_logging_enabled():
        return None
    return _get_session_dir()


def reset_session() -> None:
    """Reset the session (for testing)."""
    global _session_id, _call_counter, _enabled_override
    _session_id = None
    _call_counter = 0
    _enabled_override = None

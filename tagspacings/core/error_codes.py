"""
Structured error codes for scene loading and run failures.
Use these keys in batch rows and CLI output; map to user-facing messages here.
"""

SCENE_INVALID = "scene_invalid"
NO_ELEMENTS = "no_elements"
RUN_FAILED = "run_failed"
OK = "ok"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    SCENE_INVALID: "Scene file could not be read. Check the container and element bounds.",
    NO_ELEMENTS: "No taggable elements in the container. Only measurements were produced.",
    RUN_FAILED: "Run failed. Check the scene and settings.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)

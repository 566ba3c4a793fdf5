import uuid

import ulid


def new_id() -> str:
    """Entity ids (users, workflows) are UUID4 strings."""
    return str(uuid.uuid4())


def new_execution_id(prefix: str = "exec_") -> str:
    """
    Execution ids use a ULID so they sort by start time, the way the
    browser client's `exec_<timestamp>` ids did.
    """
    return prefix + ulid.new().str

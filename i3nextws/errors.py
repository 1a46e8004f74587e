from typing import Optional


class WorkspaceNumberingError(Exception):
    pass


class SnapshotError(WorkspaceNumberingError):

    def __init__(self, query: str, cause: Exception):
        super().__init__(f'Failed to {query}: {cause}')
        self.query = query
        self.cause = cause


class CommandError(WorkspaceNumberingError):

    def __init__(self, entity: str, target: Optional[int], command: str,
                 reason: str):
        super().__init__(
            f'Failed to {command!r} ({entity} -> workspace {target}): '
            f'{reason}')
        self.entity = entity
        self.target = target
        self.command = command
        self.reason = reason

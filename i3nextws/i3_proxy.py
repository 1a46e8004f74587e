from typing import List

import i3ipc

from i3nextws import log_util

logger = log_util.logger


class I3CommandError(Exception):

    def __init__(self, command: str, error: str):
        super().__init__(f'i3 command {command!r} failed: {error}')
        self.command = command
        self.error = error


class I3Proxy:

    def __init__(self,
                 i3_connection: i3ipc.Connection,
                 dry_run: bool = True):
        self.i3_connection = i3_connection
        self.dry_run = dry_run

    def get_workspaces(self) -> List[i3ipc.WorkspaceReply]:
        return self.i3_connection.get_workspaces()

    def get_tree(self) -> i3ipc.Con:
        return self.i3_connection.get_tree()

    def send_i3_command(self, command: str) -> None:
        if self.dry_run:
            log_prefix = '[dry-run] would send'
        else:
            log_prefix = 'Sending'
        logger.info("%s i3 command: '%s'", log_prefix, command)
        if self.dry_run:
            return
        try:
            replies = self.i3_connection.command(command)
        except OSError as e:
            raise I3CommandError(command, str(e)) from e
        if not replies:
            raise I3CommandError(command, 'no reply from i3')
        for reply in replies:
            if not reply.success:
                raise I3CommandError(command, reply.error)


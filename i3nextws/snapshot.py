# Read-only snapshot of the i3 state that the numbering operations consume.
#
# The i3ipc objects are converted to plain containers right after they are
# queried, so that the planning code can be tested without an i3 connection
# and can't accidentally trigger new IPC calls (i3ipc.Con has methods that
# query i3 lazily).
import re
from typing import List, Optional, Sequence

import i3ipc

from i3nextws import log_util
from i3nextws.errors import SnapshotError

logger = log_util.logger

KIND_WORKSPACE = 'workspace'
KIND_WINDOW_CONTAINER = 'window-container'
KIND_OTHER = 'other'

_I3_TYPE_TO_KIND = {
    'workspace': KIND_WORKSPACE,
    'con': KIND_WINDOW_CONTAINER,
    'floating_con': KIND_WINDOW_CONTAINER,
}

_INTEGER_NAME_RE = re.compile(r'[+-]?[0-9]+')


class WorkspaceSummary:

    def __init__(self, num: int, focused: bool, name: str):
        # i3 uses -1 for workspaces whose name doesn't start with a number.
        self.num: int = num
        self.focused: bool = focused
        self.name: str = name

    @classmethod
    def from_reply(cls, reply: i3ipc.WorkspaceReply) -> 'WorkspaceSummary':
        return cls(int(reply.num), bool(reply.focused), str(reply.name))

    def __eq__(self, other):
        if not isinstance(other, WorkspaceSummary):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __str__(self):
        return str(self.__dict__)

    __repr__ = __str__


class ContainerNode:

    # pylint: disable=too-many-arguments
    def __init__(self,
                 kind: str,
                 con_id: int,
                 name: Optional[str] = None,
                 window: Optional[int] = None,
                 nodes: Sequence['ContainerNode'] = (),
                 floating_nodes: Sequence['ContainerNode'] = ()):
        self.kind: str = kind
        self.id: int = con_id  # pylint: disable=invalid-name
        self.name: Optional[str] = name
        self.window: Optional[int] = window
        self.nodes = tuple(nodes)
        self.floating_nodes = tuple(floating_nodes)

    @classmethod
    def from_con(cls, con: i3ipc.Con) -> 'ContainerNode':
        return cls(kind=_I3_TYPE_TO_KIND.get(con.type, KIND_OTHER),
                   con_id=con.id,
                   name=con.name,
                   window=con.window,
                   nodes=[cls.from_con(c) for c in con.nodes],
                   floating_nodes=[cls.from_con(c) for c in con.floating_nodes])

    def has_window(self) -> bool:
        return bool(self.window)

    def workspace_number(self) -> Optional[int]:
        """Returns the number in the name of a workspace node.

        Returns None for non-workspace nodes and for workspaces whose name is
        not an integer, such as the scratchpad workspace "__i3_scratch" or
        named workspaces like "3:mail".
        """
        if self.kind != KIND_WORKSPACE or self.name is None:
            return None
        # int() also accepts whitespace, underscores and non-ASCII digits.
        if not _INTEGER_NAME_RE.fullmatch(self.name):
            return None
        return int(self.name)

    def __str__(self):
        return (f'ContainerNode(kind={self.kind}, id={self.id}, '
                f'name={self.name!r}, window={self.window})')

    __repr__ = __str__


def read_workspaces(i3_proxy) -> List[WorkspaceSummary]:
    # i3ipc raises plain Exception instances for some connection failures, so
    # the catch can't be narrower.
    try:
        workspaces = [
            WorkspaceSummary.from_reply(reply)
            for reply in i3_proxy.get_workspaces()
        ]
    except Exception as e:  # pylint: disable=broad-except
        raise SnapshotError('list workspaces', e) from e
    logger.debug('Workspaces snapshot: %s', workspaces)
    return workspaces


def read_tree(i3_proxy) -> ContainerNode:
    try:
        return ContainerNode.from_con(i3_proxy.get_tree())
    except Exception as e:  # pylint: disable=broad-except
        raise SnapshotError('get container tree', e) from e

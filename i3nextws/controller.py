#!/usr/bin/env python3

from typing import List, Optional, Sequence

from i3nextws import i3_proxy, log_util, numbering
from i3nextws.errors import CommandError
from i3nextws.snapshot import (KIND_WORKSPACE, ContainerNode,
                               WorkspaceSummary, read_tree, read_workspaces)

RenumberMapping = numbering.RenumberMapping

logger = log_util.logger


class I3Command:
    """A single planned i3 command.

    `entity` and `target` describe what the command acts on, and are only used
    for reporting which step failed.
    """

    def __init__(self, command: str, entity: str, target: Optional[int]):
        self.command: str = command
        self.entity: str = entity
        self.target: Optional[int] = target

    def __eq__(self, other):
        if not isinstance(other, I3Command):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __str__(self):
        return self.command

    __repr__ = __str__


def move_focused_command(number: int) -> I3Command:
    return I3Command(f'move container to workspace number {number}',
                     'focused container', number)


def move_window_command(con_id: int, number: int) -> I3Command:
    # The window is addressed by its container id, since it's usually not the
    # focused container.
    return I3Command(
        f'[con_id={con_id}] move window to workspace number {number}',
        f'con_id {con_id}', number)


def rename_workspace_command(old_number: int, new_number: int) -> I3Command:
    return I3Command(
        f'rename workspace number {old_number} to {new_number}',
        f'workspace {old_number}', new_number)


def focus_workspace_command(number: int,
                            auto_back_and_forth: bool = True) -> I3Command:
    options = ''
    if not auto_back_and_forth:
        options = '--no-auto-back-and-forth '
    return I3Command(f'workspace {options}number {number}',
                     f'workspace {number}', number)


def plan_window_moves(node: ContainerNode,
                      mapping: RenumberMapping,
                      workspace_number: int = 0) -> List[I3Command]:
    """Plans moving every window to the new number of its workspace.

    `workspace_number` is the number of the closest workspace ancestor of
    `node`, or 0 outside of numbered workspaces. Windows in workspaces with
    non numeric names (for example the scratchpad) are never moved.
    """
    if node.kind == KIND_WORKSPACE:
        workspace_number = node.workspace_number() or 0
    commands = []
    if node.has_window() and workspace_number > 0:
        new_number = mapping.get(workspace_number, workspace_number)
        if new_number != workspace_number:
            commands.append(move_window_command(node.id, new_number))
    # Floating windows are owned by the workspace as well, so they move with
    # the tiled ones.
    for child in node.nodes + node.floating_nodes:
        commands.extend(plan_window_moves(child, mapping, workspace_number))
    return commands


def plan_renames(workspaces: Sequence[WorkspaceSummary],
                 mapping: RenumberMapping) -> List[I3Command]:
    commands = []
    for workspace in workspaces:
        new_number = mapping.get(workspace.num)
        if new_number is not None and new_number != workspace.num:
            commands.append(rename_workspace_command(workspace.num,
                                                     new_number))
    return commands


def get_focused_workspace(
        workspaces: Sequence[WorkspaceSummary]) -> Optional[WorkspaceSummary]:
    for workspace in workspaces:
        if workspace.focused:
            return workspace
    return None


def plan_focus_restore(workspaces: Sequence[WorkspaceSummary],
                       mapping: RenumberMapping) -> List[I3Command]:
    focused_workspace = get_focused_workspace(workspaces)
    if focused_workspace is None or focused_workspace.num <= 0:
        return []
    if focused_workspace.num not in mapping:
        return []
    # The focused workspace is switched to even if its number didn't change,
    # so auto back and forth must not kick in.
    return [
        focus_workspace_command(mapping[focused_workspace.num],
                                auto_back_and_forth=False)
    ]


def plan_renumber(workspaces: Sequence[WorkspaceSummary],
                  tree: ContainerNode) -> List[I3Command]:
    # NOTE: All the windows must be moved before any workspace is renamed.
    # Window moves address workspaces by number, so renaming a workspace first
    # would make the moves of its windows (and of the windows in the workspace
    # that previously had the new number) land in the wrong workspace.
    # Unnumbered workspaces (num -1) are left out so they keep their names.
    numbers = [ws.num for ws in workspaces if ws.num > 0]
    mapping = numbering.compute_renumber_mapping(numbers)
    if numbering.is_identity(mapping):
        logger.info('Workspaces are already numbered consecutively')
    return (plan_window_moves(tree, mapping) +
            plan_renames(workspaces, mapping) +
            plan_focus_restore(workspaces, mapping))


def plan_move_to_new(workspaces: Sequence[WorkspaceSummary],
                     switch: bool = False) -> List[I3Command]:
    number = numbering.find_next_free_number(
        numbering.get_workspace_numbers(workspaces))
    logger.info('Next free workspace number: %d', number)
    commands = [move_focused_command(number)]
    if switch:
        commands.append(focus_workspace_command(number))
    return commands


def execute(i3_proxy_: i3_proxy.I3Proxy, plan: Sequence[I3Command]) -> None:
    """Sends the commands in order, stopping at the first failure.

    Commands that were already sent are not reverted.
    """
    for index, command in enumerate(plan):
        try:
            i3_proxy_.send_i3_command(command.command)
        except i3_proxy.I3CommandError as e:
            logger.warning('Aborting after %d of %d commands', index,
                           len(plan))
            raise CommandError(command.entity, command.target,
                               command.command, e.error) from e


class WorkspaceNumberingController:

    def __init__(self, i3_proxy_: i3_proxy.I3Proxy):
        self.i3_proxy = i3_proxy_

    def move_to_new_workspace(self, switch: bool = False) -> List[I3Command]:
        workspaces = read_workspaces(self.i3_proxy)
        plan = plan_move_to_new(workspaces, switch)
        execute(self.i3_proxy, plan)
        return plan

    def renumber_workspaces(self) -> List[I3Command]:
        workspaces = read_workspaces(self.i3_proxy)
        tree = read_tree(self.i3_proxy)
        plan = plan_renumber(workspaces, tree)
        logger.debug('Renumber plan: %s', plan)
        execute(self.i3_proxy, plan)
        return plan

"""Todo-list manager backed by a JSON file.

Usage:
  todo add <description> [--priority low|medium|high]
  todo list
  todo done <id>
  todo remove <id>
"""
import argparse
import logging
import sys
from typing import List, Optional

from cli_toolkit.application.todo_service import TodoService
from cli_toolkit.config import load_settings
from cli_toolkit.domain.errors import InvalidTaskIdError, ToolkitError
from cli_toolkit.domain.models import Priority
from cli_toolkit.infrastructure.json_task_storage import JsonTaskStorage
from cli_toolkit.logging_setup import configure_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo", description="A simple task manager")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--file", default=None, help="Task file (default: $TODO_FILE or todos.json)")
    commands = parser.add_subparsers(dest="command")

    add = commands.add_parser("add", help="Add a task")
    add.add_argument("description")
    add.add_argument("--priority", default=Priority.MEDIUM.value, help="low, medium or high")

    commands.add_parser("list", aliases=["ls"], help="List tasks")

    done = commands.add_parser("done", help="Mark a task as completed")
    done.add_argument("id")

    remove = commands.add_parser("remove", aliases=["rm"], help="Remove a task")
    remove.add_argument("id")

    return parser


def parse_task_id(text: str) -> int:
    try:
        task_id = int(text)
    except ValueError:
        raise InvalidTaskIdError(f"Invalid ID: '{text}'") from None
    if task_id < 0:
        raise InvalidTaskIdError(f"Invalid ID: '{text}'")
    return task_id


def cmd_add(service: TodoService, args: argparse.Namespace) -> None:
    priority = Priority.parse(args.priority)
    task = service.add(args.description, priority)
    print(f"Added: {task.description} (id: {task.id}, priority: {task.priority})")


def cmd_list(service: TodoService, args: argparse.Namespace) -> None:
    tasks = service.list_tasks()

    if not tasks:
        print('No tasks yet. Add one with: todo add "your task"')
        return

    pending = sum(1 for task in tasks if not task.completed)
    completed = len(tasks) - pending

    print(f"  {'ID':<4} {'Status':<8} {'Priority':<9} Description")
    print("  " + "-" * 50)
    for task in tasks:
        status = "x" if task.completed else " "
        print(f"  {task.id:<4} [{status}]      {str(task.priority):<8}  {task.description}")

    print()
    print(f"  {pending} pending, {completed} completed")


def cmd_done(service: TodoService, args: argparse.Namespace) -> None:
    task, already_completed = service.complete(parse_task_id(args.id))
    if already_completed:
        print(f"Task {task.id} is already completed: {task.description}")
    else:
        print(f"Completed: {task.description}")


def cmd_remove(service: TodoService, args: argparse.Namespace) -> None:
    task = service.remove(parse_task_id(args.id))
    print(f"Removed: {task.description}")


COMMANDS = {
    "add": cmd_add,
    "list": cmd_list,
    "ls": cmd_list,
    "done": cmd_done,
    "remove": cmd_remove,
    "rm": cmd_remove,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, verbose=args.verbose)
    service = TodoService(JsonTaskStorage(args.file or settings.todo_file))

    try:
        COMMANDS[args.command](service, args)
    except ToolkitError as e:
        logger.debug(f"todo {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

"""Command-line interface loop for the task list.

This is the presentation layer: it renders the store, parses commands and
is the only place that rejects empty titles. Redraws are driven by store
notifications rather than by the loop itself.
"""
import os
from typing import List, Optional
from quickreminder.models import Task, TaskCategory, DEFAULT_CATEGORY
from quickreminder.store import TaskStore
from quickreminder.theme import (color, progress_bar, category_color, HEADER_COLOR, ID_COLOR,
                   EMPTY_COLOR, DONE_COLOR, BOLD)

TITLE = "Task Manager"
BAR_WIDTH = 24


def _clear_screen() -> None:
    # ESC[3J (scrollback) first, then home/clear/home
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


def _parse_id(raw: str) -> Optional[int]:
    raw = raw.rstrip('.')
    # isdigit() accepts superscripts and other digits int() rejects
    if not (raw.isascii() and raw.isdecimal()):
        return None
    return int(raw)


def format_task(task: Task) -> str:
    prefix = color(f"{task.id}.", ID_COLOR) + ' '
    box = '[x]' if task.is_completed else '[ ]'
    title = task.title if task.title else '<untitled>'
    if task.is_completed:
        title = color(title, DONE_COLOR)
    label = color(task.category.value, category_color(task.category))
    return f"{prefix}{box} {title}  {label}"


def format_progress(store: TaskStore) -> str:
    rate = store.completion_rate()
    return f"{progress_bar(rate, BAR_WIDTH)} {rate:.0%} ({store.completed_count()}/{len(store)})"


class CLI:
    def __init__(self, store: TaskStore, alt_screen: Optional[bool] = None):
        self.store: TaskStore = store
        # Alt screen default ON; disable with QUICKREMINDER_ALT_SCREEN=0 (or false/no/off)
        if alt_screen is None:
            alt_screen = _truthy_env(os.getenv("QUICKREMINDER_ALT_SCREEN"), True)
        self.alt_screen: bool = alt_screen
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, store: TaskStore) -> None:
        self.render()

    def run(self) -> None:
        """Main REPL loop.

        The list is drawn once up front and then redrawn by the store's
        change notifications, so messages printed after a command stay
        visible until the next change.
        """
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            self.render()
            while True:
                line = input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the list...")
                    self.render()
                    continue
                if lower == 'exit':
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            self._unsubscribe()
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    # -------------------- rendering --------------------
    def render(self) -> None:
        _clear_screen()
        print(color(f"{TITLE}:", HEADER_COLOR, BOLD))
        self.display()

    def display(self) -> None:
        print(format_progress(self.store))
        print(color('-' * BAR_WIDTH, HEADER_COLOR))
        if not len(self.store):
            print(color('(no tasks)', EMPTY_COLOR))
            return
        for task in self.store:
            print(format_task(task))

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        cmd = tokens[0].lower()
        if cmd == 'add':
            self._cmd_add(tokens)
        elif cmd in ('x', 'toggle', 'done'):
            self._cmd_toggle(tokens)
        elif cmd in ('rm', 'remove', 'del'):
            self._cmd_rm(tokens)
        else:
            self.render()
            print("\nUnknown command. Type 'help' for instructions.")

    # ---- individual command helpers ----
    def _cmd_add(self, tokens: List[str]) -> None:
        if len(tokens) == 1:
            self._add()
            return
        words = tokens[1:]
        category = DEFAULT_CATEGORY
        # a trailing @word that is not a category stays in the title
        if words[-1].startswith('@'):
            parsed = TaskCategory.parse(words[-1][1:])
            if parsed is not None:
                category = parsed
                words = words[:-1]
        title = ' '.join(words).strip()
        if not title:
            print("Title required.")
            return
        self.store.add_task(title, category)

    def _cmd_toggle(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            print("Usage: x <id>")
            return
        tid = _parse_id(tokens[1])
        if tid is None:
            print("Invalid id.")
            return
        if self.store.get_task(tid) is None:
            print(f"Task id {tid} not found.")
            return
        self.store.toggle_task_completion(tid)

    def _cmd_rm(self, tokens: List[str]) -> None:
        if len(tokens) == 1:
            self._remove()
            return
        if len(tokens) != 2:
            print("Usage: rm <id>")
            return
        tid = _parse_id(tokens[1])
        if tid is None:
            print("Invalid id.")
            return
        self._remove_by_id(tid)

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  add                    Add a new task (prompts for title and category)")
        print("  add <title...> [@cat]  Shorthand add; trailing @w (Work), @h (Home) or @p (Personal) sets category")
        print("  x <id>                 Toggle completion (aliases: toggle, done)")
        print("  rm <id>                Delete a task (aliases: remove, del; prompts without id)")
        print("  help                   Show this help (press Enter to return)")
        print("  exit                   Quit")

    def _add(self) -> None:
        title = input("Enter task title: ").strip()
        if not title:
            print("Title required.")
            return
        raw = input("Category (w/h/p, Enter for Work): ").strip()
        category = DEFAULT_CATEGORY
        if raw:
            parsed = TaskCategory.parse(raw)
            if parsed is None:
                print("Invalid category.")
                return
            category = parsed
        self.store.add_task(title, category)

    def _remove(self) -> None:
        tid = _parse_id(input("Enter task id to remove: ").strip())
        if tid is None:
            print("Invalid id.")
            return
        self._remove_by_id(tid)

    def _remove_by_id(self, tid: int) -> None:
        task = self.store.get_task(tid)
        if task is None:
            print(f"Task id {tid} not found.")
            return
        self.store.remove_task(tid)
        print(f'Task "{task.title}" removed.')

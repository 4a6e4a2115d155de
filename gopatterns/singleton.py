"""Singleton: one shared instance created safely across threads."""

from __future__ import annotations

import argparse
import sys
import threading


class Single:
    """The class of which only one instance is ever made."""


_lock = threading.Lock()
_instance: Single | None = None

_once_lock = threading.Lock()
_once_done = False
_once_instance: Single | None = None


def _say(message: str) -> None:
    sys.stdout.write(message + "\n")


def get_instance() -> Single:
    """Return the shared instance, creating it under a lock on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _say("Creating single instance now.")
                _instance = Single()
            else:
                _say("Single instance already created.")
    else:
        _say("Single instance already created.")
    return _instance


def get_instance_once() -> Single | None:
    """Return the shared instance, creating it exactly once.

    A caller that arrives while another is creating the instance waits
    and prints nothing.
    """
    global _once_done, _once_instance
    if _once_instance is None:
        with _once_lock:
            if not _once_done:
                _say("Creating single instance now.")
                _once_instance = Single()
                _once_done = True
    else:
        _say("Single instance already created.")
    return _once_instance


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Request a singleton from many threads.")
    parser.add_argument("variant", nargs="?", choices=("default", "once"), default="default")
    args = parser.parse_args(argv)
    target = get_instance_once if args.variant == "once" else get_instance

    threads = [threading.Thread(target=target) for _ in range(30)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


if __name__ == "__main__":
    main()
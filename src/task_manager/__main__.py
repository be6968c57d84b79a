"""Entry point for python -m task_manager."""

from task_manager.cli import main

if __name__ == "__main__":
    main()

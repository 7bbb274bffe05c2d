"""Entry point: python -m todo_cli"""

from todo_cli.cli.app import main

if __name__ == "__main__":
    main()

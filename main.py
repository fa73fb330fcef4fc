"""Main entry point for quiz-app CLI."""

from src.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()

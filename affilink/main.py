from affilink.cli import app


def main() -> None:
    """Entry point: hand argv to the command line app."""
    app()


if __name__ == "__main__":
    main()

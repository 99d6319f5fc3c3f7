"""Main entry point for ConsultLens."""

from consultlens.cli import main as cli_main


def main():
    cli_main()


if __name__ == "__main__":
    main()

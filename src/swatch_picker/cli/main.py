"""Console script entry point."""


def main() -> None:
    """Main CLI entry point."""
    from swatch_picker.cli.app import create_app
    app = create_app()
    app()


if __name__ == "__main__":
    main()

"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Any, NoReturn, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install swatch-picker[cli]")

    from swatch_picker.config import SwatchesConfig, load_config
    from swatch_picker.core.errors import SwatchPickerError
    from swatch_picker.picker import SwatchPicker
    from swatch_picker.presets.catalog import PRESETS

    app = typer.Typer(
        name="swatch-picker",
        help="Resolve, preview, and pick from color swatch grids.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    ColorsArg = Annotated[Optional[list[str]], typer.Argument(
        help="Colors to show; with --grid each argument is a comma-separated row")]
    PresetOpt = Annotated[Optional[str], typer.Option("--preset", "-p", help="Preset name")]
    ConfigOpt = Annotated[Optional[Path], typer.Option("--config", "-c", help="JSON config file")]
    GridOpt = Annotated[bool, typer.Option("--grid", "-g", help="Treat each argument as a row")]
    ExceptionOpt = Annotated[Optional[list[str]], typer.Option(
        "--exception", "-e", help="Exception color (repeatable)")]
    ModeOpt = Annotated[Optional[str], typer.Option("--mode", "-m", help="Exception mode: hidden or disabled")]
    RowLengthOpt = Annotated[Optional[int], typer.Option("--row-length", "-r", help="Swatches per row")]
    MaxHeightOpt = Annotated[Optional[int], typer.Option("--max-height", help="Popover height cap in px")]
    SwatchSizeOpt = Annotated[Optional[int], typer.Option("--swatch-size", help="Swatch size in px")]
    InlineOpt = Annotated[Optional[bool], typer.Option("--inline/--popover", help="Inline or popover mode")]
    ValueOpt = Annotated[Optional[str], typer.Option("--value", help="Initially selected color")]

    def build_picker(
        colors: Optional[list[str]],
        preset: Optional[str],
        config: Optional[Path],
        grid: bool,
        exception: Optional[list[str]],
        mode: Optional[str],
        row_length: Optional[int],
        **overrides: Any,
    ) -> SwatchPicker:
        if colors and preset:
            err_console.print("[red]Pass either colors or --preset, not both[/]")
            raise typer.Exit(2)

        base = load_config(config) if config else SwatchesConfig()
        changes: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        if preset:
            changes["colors"] = preset
        elif colors:
            if grid:
                changes["colors"] = [[c.strip() for c in row.split(",") if c.strip()] for row in colors]
            else:
                changes["colors"] = list(colors)
        if exception:
            changes["exceptions"] = tuple(exception)
        if mode is not None:
            changes["exception_mode"] = mode
        if row_length is not None:
            changes["row_length"] = row_length
        return SwatchPicker(base.replace(**changes))

    def fail(error: SwatchPickerError) -> NoReturn:
        err_console.print(f"[red]{error}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ) -> None:
        """Resolve, preview, and pick from color swatch grids."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=err_console, show_path=False)],
            )

    @app.command()
    def presets() -> None:
        """List the built-in presets."""
        table = Table(title="Presets")
        table.add_column("Name", style="bold cyan", no_wrap=True)
        table.add_column("Swatches", justify="right")
        table.add_column("Shape")
        table.add_column("Layout")
        for name, preset in PRESETS.items():
            nested = bool(preset.swatches) and isinstance(preset.swatches[0], tuple)
            shape = f"{len(preset.swatches)} rows" if nested else "flat"
            layout = ", ".join(f"{k}={v}" for k, v in preset.layout_fields().items())
            table.add_row(name, str(preset.swatch_count), shape, layout or "-")
        console.print(table)

    @app.command()
    def show(
        colors: ColorsArg = None,
        preset: PresetOpt = None,
        config: ConfigOpt = None,
        grid: GridOpt = False,
        exception: ExceptionOpt = None,
        mode: ModeOpt = None,
        row_length: RowLengthOpt = None,
        max_height: MaxHeightOpt = None,
        swatch_size: SwatchSizeOpt = None,
        inline: InlineOpt = None,
        value: ValueOpt = None,
    ) -> None:
        """Print the resolved swatch grid to the terminal."""
        from swatch_picker.render.terminal import TerminalSwatchRenderer

        try:
            picker = build_picker(colors, preset, config, grid, exception, mode, row_length,
                                  max_height=max_height, swatch_size=swatch_size,
                                  inline=inline, value=value)
        except SwatchPickerError as e:
            fail(e)

        renderer = TerminalSwatchRenderer(background=picker.config.background_color)
        print(renderer.render(picker.grid, picker.layout, is_selected=picker.is_selected))

        layout = picker.layout
        size = picker.size
        cap = "none" if layout.max_height is None else f"{layout.max_height}px"
        console.print(
            f"[dim]{len(picker.resolution.flat())} swatches · "
            f"swatch {layout.swatch_size}px · spacing {layout.spacing_size}px · "
            f"radius {layout.border_radius} · max-height {cap} · "
            f"{size.width}x{size.height}px[/]",
            soft_wrap=True,
        )

    @app.command()
    def export(
        output: Annotated[Path, typer.Argument(help="Destination PNG file")],
        colors: ColorsArg = None,
        preset: PresetOpt = None,
        config: ConfigOpt = None,
        grid: GridOpt = False,
        exception: ExceptionOpt = None,
        mode: ModeOpt = None,
        row_length: RowLengthOpt = None,
        max_height: MaxHeightOpt = None,
        swatch_size: SwatchSizeOpt = None,
        inline: InlineOpt = None,
        value: ValueOpt = None,
        background: Annotated[Optional[str], typer.Option("--background", help="Sheet background color")] = None,
    ) -> None:
        """Write the swatch grid as a PNG swatch sheet."""
        try:
            from swatch_picker.render.image import render_png
            picker = build_picker(colors, preset, config, grid, exception, mode, row_length,
                                  max_height=max_height, swatch_size=swatch_size,
                                  inline=inline, value=value, background_color=background)
            render_png(picker.grid, picker.layout, output,
                       background_color=picker.config.background_color,
                       is_selected=picker.is_selected)
        except ImportError as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        except SwatchPickerError as e:
            fail(e)

        console.print(f"[green]Wrote {output}[/]")

    @app.command()
    def pick(
        colors: ColorsArg = None,
        preset: PresetOpt = None,
        config: ConfigOpt = None,
        grid: GridOpt = False,
        exception: ExceptionOpt = None,
        mode: ModeOpt = None,
        row_length: RowLengthOpt = None,
        inline: InlineOpt = None,
        value: ValueOpt = None,
    ) -> None:
        """Pick a color interactively and print it."""
        from swatch_picker.cli.session import run_picker

        try:
            picker = build_picker(colors, preset, config, grid, exception, mode, row_length,
                                  inline=inline, value=value)
        except SwatchPickerError as e:
            fail(e)

        chosen = run_picker(picker)
        if chosen is None:
            raise typer.Exit(1)
        print(chosen)

    return app

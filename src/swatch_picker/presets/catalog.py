"""Built-in swatch presets."""

from swatch_picker.presets.registry import PresetDefinition, PresetRegistry


# Registry of built-in presets
PRESETS: dict[str, PresetDefinition] = {
    "simple": PresetDefinition(
        swatches=(
            "#1FBC9C", "#1CA085", "#2ECC70", "#27AF60",
            "#3398DB", "#2980B9", "#A463BF", "#8E43AD",
            "#3D556E", "#222F3D", "#F2C511", "#F39C19",
            "#E84B3C", "#C0382B", "#DDE6E8", "#BDC3C8",
        ),
        row_length=4,
    ),

    "text-basic": PresetDefinition(
        swatches=(
            "#CC0001", "#E36101", "#FFCC00", "#009900",
            "#0066CB", "#000000", "#FFFFFF",
        ),
        show_border=True,
    ),

    # Google Docs text palette: grays, pure hues, then five tint/shade bands
    "text-advanced": PresetDefinition(
        swatches=(
            ("#000000", "#434343", "#666666", "#999999", "#b7b7b7",
             "#cccccc", "#d9d9d9", "#efefef", "#f3f3f3", "#ffffff"),
            ("#980000", "#ff0000", "#ff9900", "#ffff00", "#00ff00",
             "#00ffff", "#4a86e8", "#0000ff", "#9900ff", "#ff00ff"),
            ("#e6b8af", "#f4cccc", "#fce5cd", "#fff2cc", "#d9ead3",
             "#d0e0e3", "#c9daf8", "#cfe2f3", "#d9d2e9", "#ead1dc"),
            ("#dd7e6b", "#ea9999", "#f9cb9c", "#ffe599", "#b6d7a8",
             "#a2c4c9", "#a4c2f4", "#9fc5e8", "#b4a7d6", "#d5a6bd"),
            ("#cc4125", "#e06666", "#f6b26b", "#ffd966", "#93c47d",
             "#76a5af", "#6d9eeb", "#6fa8dc", "#8e7cc3", "#c27ba0"),
            ("#a61c00", "#cc0000", "#e69138", "#f1c232", "#6aa84f",
             "#45818e", "#3c78d8", "#3d85c6", "#674ea7", "#a64d79"),
            ("#85200c", "#990000", "#b45f06", "#bf9000", "#38761d",
             "#134f5c", "#1155cc", "#0b5394", "#351c75", "#741b47"),
            ("#5b0f00", "#660000", "#783f04", "#7f6000", "#274e13",
             "#0c343d", "#1c4587", "#073763", "#20124d", "#4c1130"),
        ),
        border_radius="0",
        swatch_size=24,
        spacing_size=0,
        show_border=True,
    ),

    # Material Design 500 shades
    "material-simple": PresetDefinition(
        swatches=(
            "#F44336", "#E91E63", "#9C27B0", "#673AB7", "#3F51B5",
            "#2196F3", "#03A9F4", "#00BCD4", "#009688", "#4CAF50",
            "#8BC34A", "#CDDC39", "#FFEB3B", "#FFC107", "#FF9800",
            "#FF5722", "#795548", "#9E9E9E", "#607D8B",
        ),
        row_length=5,
    ),

    # One row per shade (100-400), one column per hue
    "material-light": PresetDefinition(
        swatches=(
            ("#FFCDD2", "#F8BBD0", "#E1BEE7", "#D1C4E9", "#C5CAE9", "#BBDEFB",
             "#B2EBF2", "#B2DFDB", "#C8E6C9", "#FFECB3", "#FFE0B2", "#D7CCC8"),
            ("#EF9A9A", "#F48FB1", "#CE93D8", "#B39DDB", "#9FA8DA", "#90CAF9",
             "#80DEEA", "#80CBC4", "#A5D6A7", "#FFE082", "#FFCC80", "#BCAAA4"),
            ("#E57373", "#F06292", "#BA68C8", "#9575CD", "#7986CB", "#64B5F6",
             "#4DD0E1", "#4DB6AC", "#81C784", "#FFD54F", "#FFB74D", "#A1887F"),
            ("#EF5350", "#EC407A", "#AB47BC", "#7E57C2", "#5C6BC0", "#42A5F5",
             "#26C6DA", "#26A69A", "#66BB6A", "#FFCA28", "#FFA726", "#8D6E63"),
        ),
        swatch_size=32,
        spacing_size=4,
        max_height=200,
    ),

    # Same hues, shades 600-900
    "material-dark": PresetDefinition(
        swatches=(
            ("#E53935", "#D81B60", "#8E24AA", "#5E35B1", "#3949AB", "#1E88E5",
             "#00ACC1", "#00897B", "#43A047", "#FFB300", "#FB8C00", "#6D4C41"),
            ("#D32F2F", "#C2185B", "#7B1FA2", "#512DA8", "#303F9F", "#1976D2",
             "#0097A7", "#00796B", "#388E3C", "#FFA000", "#F57C00", "#5D4037"),
            ("#C62828", "#AD1457", "#6A1B9A", "#4527A0", "#283593", "#1565C0",
             "#00838F", "#00695C", "#2E7D32", "#FF8F00", "#EF6C00", "#4E342E"),
            ("#B71C1C", "#880E4F", "#4A148C", "#311B92", "#1A237E", "#0D47A1",
             "#006064", "#004D40", "#1B5E20", "#FF6F00", "#E65100", "#3E2723"),
        ),
        swatch_size=32,
        spacing_size=4,
        max_height=200,
    ),
}


def default_registry() -> PresetRegistry:
    """Registry over the built-in presets."""
    return PresetRegistry(PRESETS)


def list_presets() -> list[str]:
    """Get list of built-in preset names."""
    return list(PRESETS.keys())

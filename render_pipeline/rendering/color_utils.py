import skia

COLOR_MAP = {
    "black": skia.ColorBLACK,
    "white": skia.ColorWHITE,
    "red": skia.ColorRED,
    "green": skia.ColorGREEN,
    "blue": skia.ColorBLUE,
    "yellow": skia.ColorYELLOW,
    "cyan": skia.ColorCYAN,
    "magenta": skia.ColorMAGENTA,
    "gray": skia.Color(128, 128, 128, 255),
    "grey": skia.Color(128, 128, 128, 255),
    "lightgray": skia.Color(211, 211, 211, 255),
    "lightgrey": skia.Color(211, 211, 211, 255),
    "lightblue": skia.Color(173, 216, 230, 255),
    "darkgray": skia.Color(169, 169, 169, 255),
    "darkgrey": skia.Color(169, 169, 169, 255),
    "orange": skia.Color(255, 165, 0, 255),
    "purple": skia.Color(128, 0, 128, 255),
    "pink": skia.Color(255, 192, 203, 255),
    "brown": skia.Color(165, 42, 42, 255),
    "transparent": skia.Color(0, 0, 0, 0),
}


def is_transparent(color_str):
    """배경을 그릴 필요가 없는 색상인지 확인"""
    if color_str is None:
        return True
    color_str = color_str.lower().strip()
    if color_str in ("", "transparent", "none"):
        return True
    compact = color_str.replace(" ", "")
    return compact.startswith("rgba(") and compact.endswith(",0)")


def _parse_hex(hex_color):
    if len(hex_color) == 3:
        # #RGB -> #RRGGBB
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) == 6:
        hex_color += "ff"
    if len(hex_color) != 8:
        return None
    try:
        r, g, b, a = (int(hex_color[i:i + 2], 16) for i in range(0, 8, 2))
    except ValueError:
        return None
    return skia.Color(r, g, b, a)


def _parse_rgb_function(color_str):
    """rgb(r, g, b) / rgba(r, g, b, a)"""
    name, _, args = color_str.partition("(")
    if name not in ("rgb", "rgba") or not args.endswith(")"):
        return None
    values = [v.strip() for v in args[:-1].split(",")]
    try:
        if name == "rgb" and len(values) == 3:
            r, g, b = (int(v) for v in values)
            return skia.Color(r, g, b, 255)
        if name == "rgba" and len(values) == 4:
            r, g, b = (int(v) for v in values[:3])
            return skia.Color(r, g, b, int(float(values[3]) * 255))
    except ValueError:
        return None
    return None


def parse_color(color_str):
    """CSS 색상 문자열을 Skia Color로 변환 (알 수 없으면 검정)"""
    if color_str is None:
        return skia.ColorBLACK

    color_str = color_str.lower().strip()

    if color_str in COLOR_MAP:
        return COLOR_MAP[color_str]

    if color_str.startswith("#"):
        color = _parse_hex(color_str[1:])
    else:
        color = _parse_rgb_function(color_str)
    return skia.ColorBLACK if color is None else color

"""Generate the SwipeSaver application icon."""

import os

from PIL import Image, ImageDraw


def draw_icon(size: int) -> Image.Image:
    """Draw the icon at one size: a play triangle over a download arrow."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    bg_color = (231, 76, 60)  # Red
    white = (255, 255, 255)

    padding = size // 16
    draw.rounded_rectangle(
        [padding, padding, size - padding, size - padding],
        radius=size // 5,
        fill=bg_color,
    )

    center_x = size // 2

    # Play triangle in the upper half
    tri_height = int(size * 0.32)
    tri_top = int(size * 0.18)
    tri_left = center_x - tri_height // 3
    draw.polygon(
        [
            (tri_left, tri_top),
            (tri_left, tri_top + tri_height),
            (tri_left + int(tri_height * 0.87), tri_top + tri_height // 2),
        ],
        fill=white,
    )

    # Download arrow: shaft, head and tray
    line_width = max(1, size // 16)
    arrow_top = int(size * 0.56)
    arrow_bottom = int(size * 0.76)
    draw.line([(center_x, arrow_top), (center_x, arrow_bottom)], fill=white, width=line_width)
    head = size // 8
    draw.polygon(
        [
            (center_x - head, arrow_bottom - head),
            (center_x + head, arrow_bottom - head),
            (center_x, arrow_bottom + line_width // 2),
        ],
        fill=white,
    )
    tray_y = int(size * 0.82)
    draw.line(
        [(int(size * 0.28), tray_y), (int(size * 0.72), tray_y)],
        fill=white,
        width=line_width,
    )

    return img


def create_icon():
    """Write assets/icon.ico (all sizes) and assets/icon.png."""
    sizes = [16, 32, 48, 64, 128, 256]
    images = [draw_icon(size) for size in sizes]

    script_dir = os.path.dirname(os.path.abspath(__file__))
    assets_dir = os.path.join(script_dir, "assets")
    os.makedirs(assets_dir, exist_ok=True)

    ico_path = os.path.join(assets_dir, "icon.ico")
    png_path = os.path.join(assets_dir, "icon.png")

    images[-1].save(ico_path, format="ICO", sizes=[(s, s) for s in sizes])
    images[-1].save(png_path, format="PNG")

    print(f"Icon created: {ico_path} and {png_path}")


if __name__ == "__main__":
    create_icon()

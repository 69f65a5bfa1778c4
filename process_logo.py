from PIL import Image, ImageDraw
from dataclasses import dataclass
import os
import sys
import tempfile

# Disk mask is drawn at this scale, then box-filtered down for antialiased edges
SUPERSAMPLE = 4


class LogoError(Exception):
    pass


class LoadError(LogoError):
    pass


class SaveError(LogoError):
    pass


class GeometryError(LogoError):
    pass


@dataclass(frozen=True)
class LogoLayout:
    """Square canvas with a centred white circle and a logo centred on top.

    circle_ratio is a fraction of the canvas, logo_ratio a fraction of the circle.
    """
    canvas_size: int
    circle_ratio: float
    logo_ratio: float

    @property
    def circle_diameter(self):
        return int(self.canvas_size * self.circle_ratio)

    @property
    def circle_offset(self):
        return (self.canvas_size - self.circle_diameter) // 2

    @property
    def logo_side(self):
        return int(self.circle_diameter * self.logo_ratio)

    @property
    def logo_offset(self):
        # Relative to the canvas, not to the circle origin
        return (self.canvas_size - self.logo_side) // 2

    def validate(self):
        if self.canvas_size <= 0:
            raise GeometryError(f"Canvas size must be positive, got {self.canvas_size}")
        if self.circle_diameter < 1:
            raise GeometryError(
                f"Circle ratio {self.circle_ratio} leaves no circle on a {self.canvas_size}px canvas"
            )
        if self.logo_side < 1:
            raise GeometryError(
                f"Logo ratio {self.logo_ratio} leaves no logo in a {self.circle_diameter}px circle"
            )


DEFAULT_LAYOUT = LogoLayout(canvas_size=200, circle_ratio=0.90, logo_ratio=0.75)
# Tighter layout used for the report header
HEADER_LAYOUT = LogoLayout(canvas_size=150, circle_ratio=0.85, logo_ratio=0.80)


def load_logo(input_path):
    try:
        with Image.open(input_path) as img:
            return img.convert("RGBA")
    except (OSError, ValueError) as exc:
        # UnidentifiedImageError is an OSError
        raise LoadError(f"Could not load image {input_path}: {exc}") from exc


def draw_circle(canvas, offset, diameter, fill=(255, 255, 255, 255)):
    big = diameter * SUPERSAMPLE
    mask = Image.new("L", (big, big), 0)
    draw = ImageDraw.Draw(mask)
    draw.ellipse((0, 0, big - 1, big - 1), fill=255)
    mask = mask.resize((diameter, diameter), Image.Resampling.BOX)

    disk = Image.new("RGBA", (diameter, diameter), fill)
    # Coverage times the fill's own alpha
    disk.putalpha(Image.eval(mask, lambda v: v * fill[3] // 255))
    canvas.alpha_composite(disk, (offset, offset))


def save_png_atomic(img, output_path):
    output_dir = os.path.dirname(os.path.abspath(output_path))
    temp_path = None
    try:
        fd, temp_path = tempfile.mkstemp(suffix=".tmp", prefix=".logo_", dir=output_dir)
        with os.fdopen(fd, "wb") as f:
            img.save(f, "PNG")
        # mkstemp creates the file owner-only
        os.chmod(temp_path, 0o644)
        os.replace(temp_path, output_path)
        temp_path = None
    except (OSError, ValueError) as exc:
        raise SaveError(f"Could not save image to {output_path}: {exc}") from exc
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            os.remove(temp_path)


def process_logo(input_path, output_path, canvas_size, circle_ratio, logo_ratio):
    layout = LogoLayout(canvas_size, circle_ratio, logo_ratio)
    layout.validate()

    print(f"Processing logo {input_path} -> {output_path}")
    print(f"Canvas: {canvas_size}x{canvas_size}")

    logo = load_logo(input_path)
    print(f"Loaded logo: {logo.width}x{logo.height}")

    # Fully transparent canvas, nothing leaks outside the circle
    canvas = Image.new("RGBA", (canvas_size, canvas_size), (0, 0, 0, 0))

    draw_circle(canvas, layout.circle_offset, layout.circle_diameter)
    print(f"White circle: {layout.circle_diameter}px at ({layout.circle_offset}, {layout.circle_offset})")

    logo = logo.resize((layout.logo_side, layout.logo_side), Image.Resampling.BILINEAR)
    canvas.alpha_composite(logo, (layout.logo_offset, layout.logo_offset))
    print(f"Logo: {layout.logo_side}px at ({layout.logo_offset}, {layout.logo_offset})")

    save_png_atomic(canvas, output_path)
    print(f"Saved processed logo to {output_path}")
    return layout


def process_logo_with_preset(input_path, output_path):
    return process_logo(
        input_path,
        output_path,
        HEADER_LAYOUT.canvas_size,
        HEADER_LAYOUT.circle_ratio,
        HEADER_LAYOUT.logo_ratio,
    )


def main(input_path="public/images/logo-source.png", output_path="public/images/logo-processed.png",
         layout=DEFAULT_LAYOUT):
    if not os.path.exists(input_path):
        print(f"Error: {input_path} not found", file=sys.stderr)
        print("Place the source logo at that path and run again.", file=sys.stderr)
        return 1

    try:
        process_logo(input_path, output_path, layout.canvas_size, layout.circle_ratio, layout.logo_ratio)
    except LogoError as exc:
        print(f"Error processing logo: {exc}", file=sys.stderr)
        return 1

    print("Done")
    print(f"  Source logo:     {input_path}")
    print(f"  Processed logo:  {output_path}")
    print(f"  Final size:      {layout.canvas_size}x{layout.canvas_size}px")
    print(f"  White circle:    {layout.circle_diameter}px diameter")
    print(f"  Centred logo:    {layout.logo_side}px")
    print("  Transparent outside the circle")
    return 0


if __name__ == "__main__":
    sys.exit(main())

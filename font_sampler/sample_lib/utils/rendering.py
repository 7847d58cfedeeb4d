"""Sample preview rendering.

This module draws handwriting samples with Pillow so they can be checked
before being handed to the font compiler.

The module provides the following functions:
    render_sample: Draw one sample onto its own canvas.
    render_sample_png: Same, encoded as PNG bytes.
    render_text_preview: Lay out a text using a sample map, with grey
        placeholders for characters that have no sample.

Example usage::

    from sample_lib.utils.rendering import render_text_preview

    img = render_text_preview(samples, "the quick brown fox", font_size=32)
    img.save('preview.png')
"""

from __future__ import annotations
import io
import math
from typing import List, Mapping, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..analysis.strokes import StrokeSegmenter
from ..domain.geometry import DrawingData, DrawingPoint

MARGIN = 20
PLACEHOLDER_WIDTH = 0.6
WORD_GAP = 0.5
BACKGROUND = 255
INK = 0
PLACEHOLDER = 240


def _draw_points(draw: ImageDraw.ImageDraw, points: Sequence[DrawingPoint],
                 offset: Tuple[float, float], scale: float, line_width: int) -> None:
    """Draw points as one polyline per pen-down run."""
    ox, oy = offset
    for run in StrokeSegmenter().split(points):
        xy = [(ox + p.x * scale, oy + p.y * scale) for p in run]
        if len(xy) == 1:
            x, y = xy[0]
            r = line_width / 2
            draw.ellipse([x - r, y - r, x + r, y + r], fill=INK)
        else:
            draw.line(xy, fill=INK, width=line_width, joint='curve')


def render_sample(drawing: DrawingData, size: Optional[int] = None,
                  line_width: int = 2) -> Image.Image:
    """Render a sample on a white canvas.

    Args:
        drawing: Sample to draw.
        size: Output width in pixels; the height keeps the canvas aspect
            ratio. Defaults to the drawing's own width.
        line_width: Stroke width in output pixels.

    Returns:
        Grayscale PIL image with black strokes.
    """
    scale = 1.0 if size is None else size / drawing.width
    width = max(1, int(round(drawing.width * scale)))
    height = max(1, int(round(drawing.height * scale)))

    img = Image.new('L', (width, height), BACKGROUND)
    _draw_points(ImageDraw.Draw(img), drawing.points, (0, 0), scale, line_width)
    return img


def render_sample_png(drawing: DrawingData, size: Optional[int] = None,
                      line_width: int = 2) -> bytes:
    """Render a sample and encode it as PNG."""
    buf = io.BytesIO()
    render_sample(drawing, size, line_width).save(buf, format='PNG')
    return buf.getvalue()


def _char_advance(samples: Mapping[str, DrawingData], char: str,
                  font_size: float, letter_spacing: float) -> float:
    sample = samples.get(char)
    if sample is None:
        return font_size * PLACEHOLDER_WIDTH * letter_spacing
    return font_size * (sample.width / sample.height) * letter_spacing


def _layout_words(samples: Mapping[str, DrawingData], text: str, font_size: float,
                  letter_spacing: float, line_height: float,
                  canvas_width: int) -> List[Tuple[str, float, float]]:
    """Place words left to right, wrapping at the right margin.

    Returns:
        (word, x, baseline_y) for every word.
    """
    max_width = canvas_width - 2 * MARGIN
    x, y = float(MARGIN), float(font_size + MARGIN)
    placed = []
    for word in text.split(' '):
        word_width = sum(_char_advance(samples, c, font_size, letter_spacing) for c in word)
        if x + word_width > max_width and x > MARGIN:
            x = float(MARGIN)
            y += font_size * line_height
        placed.append((word, x, y))
        x += word_width + font_size * WORD_GAP
    return placed


def render_text_preview(samples: Mapping[str, DrawingData], text: str,
                        font_size: int = 24, letter_spacing: float = 1.0,
                        line_height: float = 1.5, canvas_width: int = 800,
                        line_width: int = 2) -> Image.Image:
    """Render ``text`` with handwriting samples as glyphs.

    Each sample is scaled so its canvas height equals ``font_size``.
    Characters without a sample are drawn as light grey boxes.

    Args:
        samples: Character to sample map.
        text: Text to lay out; words are separated by single spaces.
        font_size: Glyph height in pixels.
        letter_spacing: Multiplier on each character's advance.
        line_height: Baseline distance as a multiple of ``font_size``.
        canvas_width: Output width; the height grows with the line count.
        line_width: Stroke width in pixels.

    Returns:
        Grayscale PIL image.
    """
    placed = _layout_words(samples, text, font_size, letter_spacing,
                           line_height, canvas_width)
    last_baseline = placed[-1][2] if placed else font_size + MARGIN
    height = int(math.ceil(last_baseline + MARGIN))

    img = Image.new('L', (canvas_width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for word, x, baseline in placed:
        top = baseline - font_size
        for char in word:
            sample = samples.get(char)
            advance = _char_advance(samples, char, font_size, letter_spacing)
            if sample is None:
                draw.rectangle([x, top, x + font_size * PLACEHOLDER_WIDTH, baseline],
                               fill=PLACEHOLDER)
            else:
                _draw_points(draw, sample.points, (x, top),
                             font_size / sample.height, line_width)
            x += advance

    return img

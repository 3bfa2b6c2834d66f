"""
SVG generation for a quadrature encoder disk.

The disk is one compound path under the even-odd fill rule:
outer rim, core hole, alignment notch, then the teeth of track A and
track B. Track B lags track A by a quarter of the tooth period
(90 electrical degrees), which is what makes the pattern quadrature.

# Example:
svg = render(n=16, duty=0.4, show_outlines=True)
"""

import math
import numbers
import warnings

from dataclasses import asdict, dataclass, fields
from typing import List, Mapping, Optional, Tuple, Union

from path_data import (
    TAU,
    annular_sector_subpath,
    circle_subpath,
    fmt_num,
)

DUTY_EPS = 1e-3
RIM_CLEARANCE = 2
NOTCH_MIN_DEPTH = 1
OUTLINE_STROKE = "#888"
OUTLINE_STROKE_WIDTH = 0.6

# camelCase spellings accepted by RenderConfig.from_options
OPTION_ALIASES = {
    "Rext": "r_ext",
    "Rcore": "r_core",
    "A_in": "a_in",
    "A_out": "a_out",
    "B_in": "b_in",
    "B_out": "b_out",
    "notchAngleDeg": "notch_angle_deg",
    "notchWidthDeg": "notch_width_deg",
    "notchDepth": "notch_depth",
    "viewMarginRatio": "view_margin_ratio",
    "fillColor": "fill_color",
    "showOutlines": "show_outlines",
}


class InvalidParameter(ValueError):
    """A parameter cannot be turned into valid disk geometry."""


@dataclass(frozen=True)
class RenderConfig:
    """
    All recognized options of the encoder disk, with their defaults.

    Radii are in user units of the viewBox, angles in degrees.
    width/height are the document size, numbers are written like path
    coordinates and strings (e.g. "100%") as they are; if one of them
    is falsy the document has no fixed size.
    """

    n: int = 8
    duty: float = 0.5
    r_ext: float = 120
    r_core: float = 18
    a_in: float = 50
    a_out: float = 70
    b_in: float = 80
    b_out: float = 100
    notch_angle_deg: float = 0
    notch_width_deg: float = 12
    notch_depth: float = 7
    view_margin_ratio: float = 0.08
    fill_color: str = "#554691"
    width: Union[float, str, None] = 360
    height: Union[float, str, None] = 360
    show_outlines: bool = False

    @classmethod
    def from_options(cls, options: Optional[Mapping] = None, **kwargs):
        """
        Merge options over the defaults.
        Keys may be field names or the camelCase names (see OPTION_ALIASES),
        kwargs win over the mapping. Unknown keys are ignored with a warning.
        """
        return cls._merge(options, kwargs, stacklevel=3)

    @classmethod
    def _merge(cls, options: Optional[Mapping], kwargs: Mapping, stacklevel: int):
        # stacklevel points the warning at whoever called into the public API
        merged = dict(options or {})
        merged.update(kwargs)
        known = {f.name for f in fields(cls)}
        values = {}
        for key, val in merged.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                warnings.warn(
                    f"Unknown encoder option {key!r} is ignored",
                    UserWarning,
                    stacklevel=stacklevel,
                )
                continue
            values[name] = val
        return cls(**values)


ConfigLike = Union[RenderConfig, Mapping, None]


@dataclass(frozen=True)
class DiskGeometry:
    """Quantities derived from a RenderConfig, angles in radians."""

    n: int
    duty: float
    theta_p: float
    offset_b: float
    r_ext_safe: float
    r_max: float
    margin: float
    view_min: float
    view_size: float
    notch_r_in: float
    notch_r_out: float

    @property
    def view_box(self) -> str:
        lo, size = fmt_num(self.view_min), fmt_num(self.view_size)
        return f"{lo} {lo} {size} {size}"


def _as_config(config: ConfigLike, options: Mapping) -> RenderConfig:
    if isinstance(config, RenderConfig):
        if not options:
            return config
        config = asdict(config)
    return RenderConfig._merge(config, options, stacklevel=4)


def validate_teeth(n) -> int:
    """Return n as int, raise InvalidParameter unless it is an integer >= 1."""
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise InvalidParameter(f"n must be an integer >= 1, got {n!r}")
    if not isinstance(n, numbers.Integral):
        if not float(n).is_integer():
            raise InvalidParameter(f"n must be an integer >= 1, got {n!r}")
        n = int(n)
    if n < 1:
        raise InvalidParameter(f"n must be an integer >= 1, got {n!r}")
    return int(n)


def clamp_duty(duty: float) -> float:
    """Keep duty inside (0, 1) so teeth are neither empty nor full circles."""
    return min(1 - DUTY_EPS, max(DUTY_EPS, duty))


def notch_radii(r_core: float, notch_depth: float, a_in: float) -> Tuple[float, float]:
    """
    Radial extent of the alignment notch.
    It starts at the core hole and must stop short of track A.
    """
    r_in = r_core
    r_out = r_core + notch_depth
    if a_in > 0 and r_out > a_in:
        r_out = (a_in + r_core) / 2
    if r_out <= r_in + 1e-6:
        r_out = r_in + NOTCH_MIN_DEPTH
    return r_in, r_out


def disk_geometry(config: RenderConfig) -> DiskGeometry:
    n = validate_teeth(config.n)
    theta_p = TAU / n
    r_ext_safe = max(
        config.r_ext, config.a_out + RIM_CLEARANCE, config.b_out + RIM_CLEARANCE
    )
    r_max = max(r_ext_safe, config.a_out, config.b_out)
    margin = config.view_margin_ratio * r_max
    notch_r_in, notch_r_out = notch_radii(
        config.r_core, config.notch_depth, config.a_in
    )
    return DiskGeometry(
        n=n,
        duty=clamp_duty(config.duty),
        theta_p=theta_p,
        offset_b=theta_p / 4,
        r_ext_safe=r_ext_safe,
        r_max=r_max,
        margin=margin,
        view_min=-(r_max + margin),
        view_size=2 * (r_max + margin),
        notch_r_in=notch_r_in,
        notch_r_out=notch_r_out,
    )


def tooth_spans(
    config: RenderConfig, track: str, geo: Optional[DiskGeometry] = None
) -> List[Tuple[float, float]]:
    """Start and end angle (radians) of every tooth on track "A" or "B"."""
    if track not in ("A", "B"):
        raise ValueError(f"Unknown track {track!r}, expected 'A' or 'B'")
    geo = geo or disk_geometry(config)
    offset = geo.offset_b if track == "B" else 0.0
    spans = []
    for k in range(geo.n):
        t0 = k * geo.theta_p + offset
        spans.append((t0, t0 + geo.duty * geo.theta_p))
    return spans


def build_path_d(config: RenderConfig, geo: Optional[DiskGeometry] = None) -> str:
    """
    d attribute of the compound disk path.
    Order: rim, core hole (if any), notch, A teeth, B teeth.
    """
    geo = geo or disk_geometry(config)
    parts = [circle_subpath(geo.r_ext_safe)]
    if config.r_core > 0:
        parts.append(circle_subpath(config.r_core))

    notch_center = math.radians(config.notch_angle_deg)
    notch_half = math.radians(config.notch_width_deg) / 2
    parts.append(
        annular_sector_subpath(
            geo.notch_r_in,
            geo.notch_r_out,
            notch_center - notch_half,
            notch_center + notch_half,
        )
    )

    for t0, t1 in tooth_spans(config, "A", geo):
        parts.append(annular_sector_subpath(config.a_in, config.a_out, t0, t1))
    for t0, t1 in tooth_spans(config, "B", geo):
        parts.append(annular_sector_subpath(config.b_in, config.b_out, t0, t1))
    return " ".join(parts)


def circle_outline(r: float) -> str:
    if not r > 0:
        return ""
    return (
        f'<circle cx="0" cy="0" r="{fmt_num(r)}" fill="none" '
        f'stroke="{OUTLINE_STROKE}" stroke-width="{fmt_num(OUTLINE_STROKE_WIDTH)}" '
        f'vector-effect="non-scaling-stroke"/>'
    )


def build_outlines(config: RenderConfig, geo: Optional[DiskGeometry] = None) -> str:
    """Diagnostic circles at every named radius, empty unless show_outlines."""
    if not config.show_outlines:
        return ""
    geo = geo or disk_geometry(config)
    radii = [
        geo.r_ext_safe,
        config.r_core,
        config.a_in,
        config.a_out,
        config.b_in,
        config.b_out,
    ]
    return "".join(circle_outline(r) for r in radii)


def _size(value) -> str:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return fmt_num(value)
    return str(value)


def render(config: ConfigLike = None, **options) -> str:
    """
    Return the SVG document of the encoder disk.
    config is a RenderConfig, a mapping of options or None for the defaults;
    keyword options are merged on top.
    Raises InvalidParameter if the tooth count is not an integer >= 1.
    """
    cfg = _as_config(config, options)
    geo = disk_geometry(cfg)
    path_d = build_path_d(cfg, geo)
    outlines = build_outlines(cfg, geo)

    if cfg.width and cfg.height:
        size_attrs = f' width="{_size(cfg.width)}" height="{_size(cfg.height)}"'
    else:
        size_attrs = ""

    return f"""<svg xmlns="http://www.w3.org/2000/svg"{size_attrs} viewBox="{geo.view_box}">
  <g transform="translate(0,0)">
    <path d="{path_d}" fill="{cfg.fill_color}" fill-rule="evenodd" stroke="none"/>
    {outlines}
  </g>
</svg>"""


def main():
    print(render())


if __name__ == "__main__":
    main()

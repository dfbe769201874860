"""
config.py - Render settings

Project: Tiny Ray Tracer
"""

import argparse
import math
from dataclasses import dataclass


@dataclass
class RenderSettings:
    """Options of a render run; defaults reproduce the demo image."""
    width: int = 1024
    height: int = 768
    fov_degrees: float = 90.0
    output: str = "out.ppm"
    gradient: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov_degrees < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov_degrees}")

    @property
    def fov(self) -> float:
        """Field of view in radians."""
        return math.radians(self.fov_degrees)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'RenderSettings':
        """Build settings from parsed command-line arguments."""
        return cls(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output=args.output,
            gradient=args.gradient,
            verbose=args.verbose,
        )

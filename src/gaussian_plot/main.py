# GaussianPlot
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Entry point for the Gaussian plot viewer."""

from __future__ import annotations

import argparse
import logging
import sys

from gaussian_plot.core.errors import GaussianPlotError
from gaussian_plot.core.logging_config import setup_logging
from gaussian_plot.core.parameters import PARAMETER_SPECS, ParameterStore, PlotParameters
from gaussian_plot.ui import style

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "gaussian-plot", description="3D surface plot of a bivariate Gaussian density."
    )
    for spec in PARAMETER_SPECS.values():
        parser.add_argument(
            f"--{spec.name}",
            dest=spec.attr,
            type=float,
            default=None,
            help=f"{spec.blurb} [{spec.minimum:g}, {spec.maximum:g}], default {spec.default:g}",
        )
    parser.add_argument("--export", metavar="PATH", help="render to PATH and exit without a window")
    parser.add_argument("--width", type=int, default=style.DEFAULT_EXPORT_SIZE[0])
    parser.add_argument("--height", type=int, default=style.DEFAULT_EXPORT_SIZE[1])
    parser.add_argument("--dpi", type=float, default=style.DEFAULT_DPI)
    parser.add_argument(
        "--antialias",
        action="store_true",
        default=style.SURFACE_ANTIALIAS,
        help="antialias the surface polygons (slower)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="console log level",
    )
    return parser


def parameters_from_args(args: argparse.Namespace) -> PlotParameters:
    """Validate the parameter options through a store and return the result."""
    store = ParameterStore()
    values = {
        spec.attr: getattr(args, spec.attr)
        for spec in PARAMETER_SPECS.values()
        if getattr(args, spec.attr) is not None
    }
    store.update(**values)
    return store.snapshot()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(app_name="GaussianPlot", console_level=getattr(logging, args.log_level))
    except OSError as e:
        # Fallback to basic logging if the log directory is not writable
        logging.basicConfig(level=args.log_level)
        log.error("Failed to setup logging: %s", e, exc_info=True)

    try:
        params = parameters_from_args(args)
    except GaussianPlotError as exc:
        parser.error(str(exc))

    if args.export:
        from gaussian_plot.ui.plots.surface_renderer import export_plot

        try:
            export_plot(
                params,
                args.export,
                args.width,
                args.height,
                args.dpi,
                antialiased=args.antialias,
            )
        except (GaussianPlotError, ValueError) as exc:
            log.error("Export failed: %s", exc)
            return 1
        return 0

    from gaussian_plot.app.launcher import GaussianPlotLauncher

    try:
        return GaussianPlotLauncher(parameters=params, antialiased=args.antialias).run()
    except Exception as e:
        log.critical("GaussianPlot crashed: %s", e, exc_info=True)
        raise


if __name__ == "__main__":  # pragma: no cover - import guard
    sys.exit(main())

"""
City Sector Generator - Main CLI

Runs one sector generation pass and prints a summary of the plots and
buildings produced.

Usage:
    python -m city_sector.main [--seed-count N] [--seed S] [--report PATH]

Example:
    python -m city_sector.main --seed-count 80 --sector-size 600 600 --report sector.json
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, Optional

from . import __version__
from .config import (
    SectorConfig,
    RoofConfig,
    DEFAULT_SEED_COUNT,
    DEFAULT_SECTOR_WIDTH,
    DEFAULT_SECTOR_HEIGHT,
    DEFAULT_BOUNDS_PADDING,
    DEFAULT_STREET_WIDTH,
    DEFAULT_BUILDING_INSET,
    DEFAULT_PLOT_SNAP_SIZE,
    MIN_PLOT_SIDE_LENGTH,
    MIN_PLOT_ANGLE_DEG,
    MIN_PLOT_AREA,
    DEFAULT_MIN_FLOORS,
    DEFAULT_MAX_FLOORS,
    DEFAULT_FLOOR_HEIGHT,
    MANSARD_HORIZONTAL_DISTANCE,
    MANSARD_RISE,
    ATTIC_HORIZONTAL_DISTANCE,
    ATTIC_RISE,
    FLAT_ROOF_EDGE_OFFSET,
)
from .generators.sector_generator import generate_sector
from .models.sector import SectorReport


@dataclass
class RunReport:
    """Report from one CLI run."""
    version: str
    success: bool
    sector: SectorReport
    processing_time_ms: int = 0
    config_used: Dict[str, object] = field(default_factory=dict)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='City Sector Generator - Voronoi plots, footprints and stepped roofs'
    )

    # Layout
    parser.add_argument(
        '--seed-count',
        type=int,
        default=DEFAULT_SEED_COUNT,
        help=f'Number of Voronoi seed points (default: {DEFAULT_SEED_COUNT})'
    )
    parser.add_argument(
        '--sector-size',
        type=float,
        nargs=2,
        metavar=('WIDTH', 'HEIGHT'),
        default=[DEFAULT_SECTOR_WIDTH, DEFAULT_SECTOR_HEIGHT],
        help='Sector width and height in meters (default: 500 500)'
    )
    parser.add_argument(
        '--padding',
        type=float,
        default=DEFAULT_BOUNDS_PADDING,
        help=f'Seed distance from the sector edge (default: {DEFAULT_BOUNDS_PADDING})'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=12345,
        help='Random seed (default: 12345)'
    )

    # Plots
    parser.add_argument(
        '--street-width',
        type=float,
        default=DEFAULT_STREET_WIDTH,
        help=f'Street width between plots (default: {DEFAULT_STREET_WIDTH})'
    )
    parser.add_argument(
        '--building-inset',
        type=float,
        default=DEFAULT_BUILDING_INSET,
        help=f'Footprint inset from the plot edge (default: {DEFAULT_BUILDING_INSET})'
    )
    parser.add_argument(
        '--pavement-outset',
        type=float,
        default=None,
        help='Pavement outset around the footprint (default: building inset)'
    )
    parser.add_argument(
        '--snap-size',
        type=float,
        default=DEFAULT_PLOT_SNAP_SIZE,
        help='Grid size for snapping plot vertices, 0 disables (default: 0)'
    )
    parser.add_argument(
        '--min-side',
        type=float,
        default=MIN_PLOT_SIDE_LENGTH,
        help=f'Minimum plot side length (default: {MIN_PLOT_SIDE_LENGTH})'
    )
    parser.add_argument(
        '--min-angle',
        type=float,
        default=MIN_PLOT_ANGLE_DEG,
        help=f'Minimum plot corner angle in degrees (default: {MIN_PLOT_ANGLE_DEG})'
    )
    parser.add_argument(
        '--min-area',
        type=float,
        default=MIN_PLOT_AREA,
        help=f'Minimum plot area (default: {MIN_PLOT_AREA})'
    )

    # Floors
    parser.add_argument(
        '--floors',
        type=int,
        nargs=2,
        metavar=('MIN', 'MAX'),
        default=[DEFAULT_MIN_FLOORS, DEFAULT_MAX_FLOORS],
        help=f'Floor count range (default: {DEFAULT_MIN_FLOORS} {DEFAULT_MAX_FLOORS})'
    )
    parser.add_argument(
        '--floor-height',
        type=float,
        default=DEFAULT_FLOOR_HEIGHT,
        help=f'Height of one floor (default: {DEFAULT_FLOOR_HEIGHT})'
    )

    # Roof layers
    parser.add_argument('--no-mansard', action='store_true', help='Disable the mansard layer')
    parser.add_argument(
        '--mansard',
        type=float,
        nargs=2,
        metavar=('DISTANCE', 'RISE'),
        default=[MANSARD_HORIZONTAL_DISTANCE, MANSARD_RISE],
        help='Mansard inset distance and rise'
    )
    parser.add_argument('--no-attic', action='store_true', help='Disable the attic layer')
    parser.add_argument(
        '--attic',
        type=float,
        nargs=2,
        metavar=('DISTANCE', 'RISE'),
        default=[ATTIC_HORIZONTAL_DISTANCE, ATTIC_RISE],
        help='Attic inset distance and rise'
    )
    parser.add_argument(
        '--flat-roof-offset',
        type=float,
        default=FLAT_ROOF_EDGE_OFFSET,
        help='Flat cap offset from the footprint; positive overhangs, negative insets (default: 0)'
    )

    # Output
    parser.add_argument(
        '--report',
        default=None,
        help='Write the run report as JSON to this path'
    )
    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG log to this path'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def run(config: SectorConfig, roof_config: RoofConfig,
        report_path: Optional[str] = None) -> RunReport:
    """
    Run one sector pass and optionally save the JSON report.

    Args:
        config: Sector configuration
        roof_config: Roof layer configuration
        report_path: Where to write the report (None = don't write)

    Returns:
        RunReport; `success` is False when the pass aborted
    """
    logger = logging.getLogger(__name__)

    start_time = time.time()
    result = generate_sector(config, roof_config)
    elapsed_ms = int((time.time() - start_time) * 1000)

    report = RunReport(
        version=__version__,
        success=not result.report.aborted,
        sector=result.report,
        processing_time_ms=elapsed_ms,
        config_used={
            'sector': asdict(config),
            'roof': asdict(roof_config),
        },
    )

    if report_path:
        save_report(report, report_path)
        logger.info(f"Report saved to {report_path}")

    logger.info(f"Pass completed in {elapsed_ms}ms")
    return report


def save_report(report: RunReport, path: str) -> None:
    """Write the run report as indented JSON."""
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(report), f, indent=2)


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    try:
        config = SectorConfig(
            seed_count=args.seed_count,
            sector_width=args.sector_size[0],
            sector_height=args.sector_size[1],
            bounds_padding=args.padding,
            seed=args.seed,
            street_width=args.street_width,
            building_inset=args.building_inset,
            plot_vertex_snap_size=args.snap_size,
            min_side_length=args.min_side,
            min_angle_deg=args.min_angle,
            min_area=args.min_area,
            min_floors=args.floors[0],
            max_floors=args.floors[1],
            floor_height=args.floor_height,
            pavement_outset=args.pavement_outset,
        )
        roof_config = RoofConfig(
            use_mansard=not args.no_mansard,
            mansard_distance=args.mansard[0],
            mansard_rise=args.mansard[1],
            use_attic=not args.no_attic,
            attic_distance=args.attic[0],
            attic_rise=args.attic[1],
            flat_roof_edge_offset=args.flat_roof_offset,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    report = run(config, roof_config, args.report)
    sector = report.sector

    if not report.success:
        print(f"\nSector pass aborted: {sector.abort_reason}")
        return 1

    print(f"\nSuccess! Generated {sector.buildings} buildings")
    print(f"Seeds: {sector.seed_count}, Delaunay triangles: {sector.triangle_count}")
    print(f"Cells: {sector.raw_cells}, Plots: {sector.plots}")

    if sector.skip_reasons:
        print(f"\nSkip reasons:")
        for reason, count in sorted(sector.skip_reasons.items(), key=lambda x: -x[1]):
            print(f"  {reason}: {count}")

    if sector.warnings:
        print(f"\nWarnings: {len(sector.warnings)}")

    if args.report:
        print(f"Report: {args.report}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""Main entry point for the task timeline layout engine."""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from ganttlayout.engine.navigation import ViewState
from ganttlayout.engine.rows import reconcile_expanded
from ganttlayout.engine.timeline import TimelineEngine
from ganttlayout.policies import get_policy
from ganttlayout.sample.generator import RosterGenerator
from ganttlayout.utils.config import load_config, get_default_config
from ganttlayout.utils.datetime_utils import parse_timestamp
from ganttlayout.utils.roster import load_roster, save_roster

logger = logging.getLogger(__name__)


def run_layout(
    config_path: str,
    roster_path: str,
    policy_name: str = None,
    reference_date: datetime = None,
    week_offset: int = 0,
    zoom: float = 1.0,
    collapsed: bool = False,
    output_dir: str = "results",
):
    """Lay out a roster file and save the result."""
    config = load_config(config_path) if config_path and Path(config_path).exists() else get_default_config()
    policy = get_policy(policy_name or config.get('ordering', {}).get('policy', 'relevance'), config)
    engine = TimelineEngine(policy, config)
    
    groups = load_roster(roster_path)
    logger.info("Loaded %d users from %s", len(groups), roster_path)
    
    expanded = frozenset() if collapsed else reconcile_expanded(frozenset(), [g.user_id for g in groups])
    state = ViewState.from_config(
        config,
        reference_date=reference_date,
        week_offset=week_offset,
        zoom=zoom,
        expanded_user_ids=expanded,
    )
    layout = engine.layout(groups, state)
    
    # Output results
    print(f"\nLayout completed using {layout.policy_name} ordering")
    print(f"Window {layout.window.start.date()} .. {layout.window.end.date()}, "
          f"{len(layout.lanes)} users, {layout.total_rows} rows")
    
    results_dir = Path(output_dir)
    results_dir.mkdir(exist_ok=True)
    
    layout_path = results_dir / f"layout_{layout.run_id}.json"
    with open(layout_path, 'w') as f:
        json.dump(layout.to_dict(), f, indent=2, default=str)
    
    # Save human-readable log
    log_path = results_dir / f"layout_{layout.run_id}.log"
    with open(log_path, 'w') as f:
        f.write(layout.to_human_readable())
    
    print(f"Layout saved to: {layout_path}")
    print(f"Human-readable log saved to: {log_path}")
    
    return layout


def run_generate(config_path: str, roster_path: str, around: datetime = None):
    """Write a sample roster file."""
    config = load_config(config_path) if config_path and Path(config_path).exists() else get_default_config()
    generator = RosterGenerator(seed=42, config=config)
    if around is None:
        around = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)
    groups = generator.generate_roster(around)
    
    path = save_roster(groups, roster_path)
    print(f"Generated {len(groups)} users, {sum(len(g.tasks) for g in groups)} tasks")
    print(f"Roster saved to: {path}")
    
    return groups


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Task Timeline Layout Engine"
    )
    parser.add_argument(
        'command',
        choices=['layout', 'generate-roster'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml, defaults used if missing)'
    )
    parser.add_argument(
        '--roster',
        type=str,
        default='roster.json',
        help='Roster file to read or write (default: roster.json)'
    )
    parser.add_argument(
        '--policy',
        type=str,
        choices=['relevance', 'input'],
        default=None,
        help='User ordering policy (default: from config)'
    )
    parser.add_argument(
        '--date',
        type=str,
        default=None,
        help='Reference date, ISO-8601 (default: today)'
    )
    parser.add_argument(
        '--week-offset',
        type=int,
        default=0,
        help='Weeks to move from the reference week (default: 0)'
    )
    parser.add_argument(
        '--zoom',
        type=float,
        default=1.0,
        help='Zoom factor between 0.5 and 2.0 (default: 1.0)'
    )
    parser.add_argument(
        '--collapsed',
        action='store_true',
        help='Start with every user collapsed'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default='results',
        help='Directory for layout output (default: results)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )
    
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    
    reference_date = parse_timestamp(args.date, "--date")
    
    if args.command == 'layout':
        run_layout(
            args.config,
            args.roster,
            policy_name=args.policy,
            reference_date=reference_date,
            week_offset=args.week_offset,
            zoom=args.zoom,
            collapsed=args.collapsed,
            output_dir=args.output_dir,
        )
    elif args.command == 'generate-roster':
        run_generate(args.config, args.roster, around=reference_date)


if __name__ == "__main__":
    main()

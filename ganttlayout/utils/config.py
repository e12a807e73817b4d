"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, layered over the defaults."""
    path = Path(config_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            overrides = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            overrides = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")
    
    return merge_config(overrides or {})


def merge_config(overrides: Dict[str, Any], base: Dict[str, Any] = None) -> Dict[str, Any]:
    """Deep-merge overrides onto base (defaults when base is omitted)."""
    if not isinstance(overrides, dict):
        raise ValueError(f"Config root must be a mapping, got {type(overrides).__name__}")
    
    merged = copy.deepcopy(base) if base is not None else get_default_config()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(value, merged[key])
        else:
            merged[key] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'timeline': {
            'base_day_width': 100,
            'min_zoom': 0.5,
            'max_zoom': 2.0,
            'zoom_step': 0.1,
            'min_width_percent': 5,
            'max_width_percent': 100,
            'min_width_pixels': 60,
        },
        'rows': {
            'row_height': 40,
            'viewport_margin': 16,
            'bar_offset': 8,
            'bar_height': 32,
        },
        'urgency': {
            'due_soon_days': 3,
        },
        'ordering': {
            'policy': 'relevance',  # 'relevance' or 'input'
        },
        'sample': {
            'seed': 42,
            'user_count': 5,
            'tasks_per_user': 6,
            'date_range_days': 21,
        },
    }

"""Reading and writing roster files."""

import json
import yaml
from pathlib import Path
from typing import List

from ..models.task import UserTaskGroup


def load_roster(roster_path: str) -> List[UserTaskGroup]:
    """Load user task groups from a YAML or JSON file.

    The file holds a list of groups, or a mapping with a 'users' list, in the
    camelCase shape returned by the team and task endpoints.
    """
    path = Path(roster_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Roster file not found: {roster_path}")
    
    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported roster file format: {path.suffix}")
    
    if isinstance(data, dict):
        data = data.get('users')
    if not isinstance(data, list):
        raise ValueError(f"Roster must be a list of users: {roster_path}")
    
    return [UserTaskGroup.from_dict(item) for item in data]


def save_roster(groups: List[UserTaskGroup], roster_path: str) -> Path:
    """Write user task groups as JSON or YAML, chosen by suffix."""
    path = Path(roster_path)
    data = [group.to_dict() for group in groups]
    
    with open(path, 'w') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)
    
    return path

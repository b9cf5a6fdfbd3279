"""
Data loader for benchmark results.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional

# Handle both module and direct execution imports
try:
    from .config import RESULTS_DIR
except ImportError:
    from config import RESULTS_DIR


def load_json(filepath: Path) -> Dict[str, Any]:
    """Load a JSON file and return its contents."""
    with open(filepath, 'r') as f:
        return json.load(f)


def find_latest_results(base_path: Path = RESULTS_DIR) -> Optional[Path]:
    """
    Find the latest timestamped results directory.

    Returns:
        Path to the latest results directory, or None if not found
    """
    if not base_path.exists():
        return None

    dirs = [d for d in base_path.iterdir() if d.is_dir() and d.name.startswith('20')]
    if not dirs:
        return None

    return sorted(dirs)[-1]


def load_benchmark_results(results_dir: Optional[Path] = None) -> List[Dict[str, Any]]:
    """
    Load per-(dtype, N) benchmark rows from results.json.

    Raises:
        FileNotFoundError: if no results directory or file exists
    """
    if results_dir is None:
        results_dir = find_latest_results()
        if results_dir is None:
            raise FileNotFoundError(f"No benchmark results under {RESULTS_DIR}")

    return load_json(Path(results_dir) / 'results.json')['results']


def group_by_dtype(rows: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Group result rows by dtype, each group sorted by N."""
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for row in rows:
        groups.setdefault(row['dtype'], []).append(row)
    for dtype in groups:
        groups[dtype].sort(key=lambda r: r['n'])
    return groups

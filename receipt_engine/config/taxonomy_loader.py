"""
Receipt taxonomy loader.
Loads CSV files describing a receipt category taxonomy.
"""

import csv
from typing import Dict, List, Optional
from pathlib import Path

from .categorizer_config import CATEGORIZER_CONFIG, DEFAULT_RECEIPT_CATEGORIES


def load_taxonomy_csv(csv_path: str) -> List[Dict[str, str]]:
    """
    Load a receipt category taxonomy from a CSV file.

    Args:
        csv_path: Path to CSV file containing the taxonomy

    Returns:
        List of category dicts with name, type and broad_type

    Example CSV format:
        name,type,broad_type
        Fruits,Fiber,Food
        Water,Other,Drinks
    """
    taxonomy = []

    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {csv_path}")

    seen = set()
    with open(csv_path, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            name = (row.get('name') or '').strip()
            if not name or name.lower() in seen:
                continue
            seen.add(name.lower())
            taxonomy.append({
                'name': name,
                'type': (row.get('type') or '').strip() or 'Other',
                'broad_type': (
                    (row.get('broad_type') or '').strip()
                    or CATEGORIZER_CONFIG["reconciliation"]["default_broad_type"]
                ),
            })

    return taxonomy


def build_broad_type_map(taxonomy: Optional[List[Dict[str, str]]] = None) -> Dict[str, str]:
    """
    Build a lowercase category name -> broad type lookup.

    Args:
        taxonomy: Taxonomy rows (defaults to DEFAULT_RECEIPT_CATEGORIES)

    Returns:
        Dictionary mapping lowercase names to broad types
    """
    rows = DEFAULT_RECEIPT_CATEGORIES if taxonomy is None else taxonomy
    default = CATEGORIZER_CONFIG["reconciliation"]["default_broad_type"]
    return {
        row["name"].strip().lower(): row.get("broad_type") or default
        for row in rows
        if row.get("name")
    }


def get_broad_type(category_name: Optional[str], broad_types: Dict[str, str]) -> str:
    """Get the broad type for a category name, "Other" when unknown."""
    default = CATEGORIZER_CONFIG["reconciliation"]["default_broad_type"]
    if not category_name:
        return default
    return broad_types.get(category_name.strip().lower(), default)

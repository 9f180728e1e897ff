"""Data loader module for parsing route CSV files."""

import logging
import os
from typing import Dict, Optional

import pandas as pd

from .models.route import RouteTable, route_key
from .utils import round_half_up

logger = logging.getLogger(__name__)


def load_route_distances(csv_path: str) -> Dict[str, int]:
    """
    Parse a routes CSV into "FROM-TO" -> km entries.

    Expected columns: departure, arrival, distance_km. Codes are stripped and
    upper-cased; rows with missing or negative distances are skipped.

    Args:
        csv_path: Path to routes CSV file

    Returns:
        Dictionary mapping route key to distance in km (empty if the file is missing)
    """
    distances: Dict[str, int] = {}

    try:
        df = pd.read_csv(csv_path)
        logger.info(f"Loaded routes CSV with {len(df)} rows")

        required_cols = ["departure", "arrival", "distance_km"]
        for col in required_cols:
            if col not in df.columns:
                raise ValueError(f"Missing required column: {col}")

        df = df.dropna(subset=required_cols).copy()
        df["departure"] = df["departure"].astype(str).str.strip().str.upper()
        df["arrival"] = df["arrival"].astype(str).str.strip().str.upper()
        df["distance_km"] = pd.to_numeric(df["distance_km"], errors="coerce")
        # NaN and infinite distances fail one of these
        df = df[(df["distance_km"] >= 0) & (df["distance_km"] < float("inf"))]

        for row in df.itertuples(index=False):
            distances[route_key(row.departure, row.arrival)] = int(round_half_up(row.distance_km))

    except FileNotFoundError:
        logger.warning(f"Routes CSV not found at {csv_path}, using empty dict")
    except Exception as e:
        logger.error(f"Error loading routes: {e}")
        raise

    logger.info(f"Successfully loaded {len(distances)} routes")
    return distances


def load_route_table(csv_path: Optional[str] = None) -> RouteTable:
    """
    Build the route table: built-in routes, overridden by CSV entries if given.

    Args:
        csv_path: Optional path to an extra routes CSV

    Returns:
        RouteTable instance
    """
    table = RouteTable()
    if not csv_path:
        return table
    if not os.path.exists(csv_path):
        logger.warning(f"Routes CSV not found at {csv_path}, using built-in routes only")
        return table
    return table.merged_with(load_route_distances(csv_path))

"""Championship standings built from per-event guess scores."""

import logging
from typing import Sequence

import pandas as pd

from guess_scoring.types import StandingsEntry

logger = logging.getLogger(__name__)

STANDINGS_COLUMNS = [
    "position",
    "participant",
    "team",
    "points",
    "last_position",
    "best_result",
    "total_predictions",
]


def build_standings(entries: Sequence[StandingsEntry]) -> pd.DataFrame:
    """
    Rank participants by total points.

    Args:
        entries: One row per participant per event (``participant``, ``team``,
            ``event``, ``score``). Events are ordered by first appearance.

    Returns:
        DataFrame with STANDINGS_COLUMNS, best participant first. Ties share
        the better position.
    """
    if not entries:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)

    df = pd.DataFrame(list(entries))
    if "team" not in df.columns:
        df["team"] = ""
    df["team"] = df["team"].fillna("")

    event_order = {event: i for i, event in enumerate(pd.unique(df["event"]))}
    df["event_index"] = df["event"].map(event_order)
    df["event_rank"] = (
        df.groupby("event")["score"].rank(ascending=False, method="min").astype(int)
    )

    latest = df.sort_values("event_index").groupby("participant").tail(1)
    last_position = latest.set_index("participant")["event_rank"]

    standings = df.groupby("participant", sort=False).agg(
        team=("team", "last"),
        points=("score", "sum"),
        best_result=("event_rank", "min"),
        total_predictions=("event", "count"),
    )
    standings["points"] = standings["points"].round(3)
    standings["last_position"] = last_position
    standings["position"] = standings["points"].rank(ascending=False, method="min").astype(int)

    standings = standings.reset_index().sort_values(
        ["position", "participant"], kind="stable"
    )
    logger.debug(f"Built standings for {len(standings)} participants over {len(event_order)} events")
    return standings[STANDINGS_COLUMNS].reset_index(drop=True)

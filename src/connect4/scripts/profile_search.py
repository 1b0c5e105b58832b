from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Sequence

from connect4.ai.minimax_agent import MinimaxAgent
from connect4.config import COLS, PROFILE_RESULTS_DIR, ROWS, EngineConfig
from connect4.game.controller import GameSession

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["depth", "game", "ply", "column", "eval", "nodes", "time_ms"]


def play_profiled_game(session: GameSession, rng: random.Random, game: int) -> List[Dict[str, int]]:
    """
    Random human vs the session's agent. One row per computer decision.
    """
    rows: List[Dict[str, int]] = []
    ply = 0

    while session.state.phase != "terminal":
        if session.state.phase == "awaiting_human":
            session.human_move(int(rng.choice(session.board.valid_moves())))
        else:
            col = session.computer_turn()
            info = session.agent.last_info
            rows.append({
                "depth": session.agent.depth,
                "game": game,
                "ply": ply,
                "column": int(col),
                "eval": int(info["eval"]),
                "nodes": int(info["nodes"]),
                "time_ms": int(info["time_ms"]),
            })
        ply += 1

    logger.info("depth=%d game=%d: %s after %d plies", session.agent.depth, game, session.state.outcome, ply)
    return rows


def profile(depths: Sequence[int], games: int, seed: int, config: EngineConfig) -> List[Dict[str, int]]:
    out: List[Dict[str, int]] = []
    for d in depths:
        agent = MinimaxAgent(name=f"Minimax d{d}", depth=d)
        session = GameSession(config=config, agent=agent)
        for g in range(games):
            session.reset()
            rng = random.Random(seed + g)
            out.extend(play_profiled_game(session, rng, g))
    return out


def write_csv(rows: Sequence[Dict[str, int]], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        w.writerows(rows)
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Profile minimax search cost over seeded games.")
    ap.add_argument("--depths", type=int, nargs="+", default=[1, 2, 3, 4], help="Search depths to profile")
    ap.add_argument("--games", type=int, default=3, help="Games per depth")
    ap.add_argument("--seed", type=int, default=1234, help="Seed for the random human side")
    ap.add_argument("--rows", type=int, default=ROWS)
    ap.add_argument("--columns", type=int, default=COLS)
    ap.add_argument("--outdir", type=str, default=PROFILE_RESULTS_DIR, help="Directory for search_profile_*.csv")
    ap.add_argument("--log-level", type=str, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = EngineConfig(rows=args.rows, columns=args.columns, search_depth=max(args.depths))
    rows = profile(args.depths, args.games, args.seed, config)

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = write_csv(rows, Path(args.outdir) / f"search_profile_{ts}.csv")
    logger.info("Wrote %d rows to %s", len(rows), out_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

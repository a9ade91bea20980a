from __future__ import annotations

import argparse
import sys

from jpffscore.export.csv_log import read_csv
from jpffscore.play import GameMeta
from jpffscore.report import scoreboard_frame
from jpffscore.scoring.board import aggregate


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("csv")
    ap.add_argument("--home", default="")
    ap.add_argument("--visitor", default="")
    args = ap.parse_args()

    meta = GameMeta(game_id="", date="", home=args.home, visitor=args.visitor)
    plays = read_csv(args.csv, meta)

    print(f"\n== Quick Board ==\nCSV: {args.csv}\nplays: {len(plays)}\n")
    print(scoreboard_frame(aggregate(plays), meta).to_string())
    scoring = [p for p in plays if p.scoring_method not in ("", "-")]
    print(f"\nscoring plays: {len(scoring)}")
    sys.stdout.flush()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        import traceback

        print("quick_board error:", e)
        traceback.print_exc()
        sys.exit(1)

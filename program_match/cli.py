# program_match/cli.py
"""
Command-line runner for the guided program match.

- ``--query`` ranks programs for one description and prints them
- ``--in`` runs a CSV/XLSX of descriptions (column ``Query``) in batch
- Identical queries are run once and fanned out
- Batch output is a CSV with headers: Query, Program_id, Score
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd
from loguru import logger

from program_match.api import match_single_query


def load_queries(path: Path) -> List[str]:
    ext = path.suffix.lower()
    df = pd.read_excel(path) if ext in {".xlsx", ".xls"} else pd.read_csv(path)
    cols = {c.lower(): c for c in df.columns}
    qcol = cols.get("query")
    if not qcol:
        raise ValueError(f"Expected column 'Query' in {path}. Found: {list(df.columns)}")
    return df[qcol].fillna("").astype(str).str.strip().tolist()


def _dedup_preserve_order(seq: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(seq))


def _predict_for_query(q: str, topk: int) -> List[Tuple[str, int]]:
    return [(r.entry.id, r.score) for r in match_single_query(q)[:topk]]


def write_results_csv(preds: Dict[str, List[Tuple[str, int]]], queries: Sequence[str], out_path: Path) -> None:
    """One row per (query, program) pair, in input order then rank order."""
    rows: List[Tuple[str, str, int]] = []
    for q in queries:
        for pid, score in preds.get(q, []):
            rows.append((q, pid, score))
    df = pd.DataFrame(rows, columns=["Query", "Program_id", "Score"])
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)


def run_batch(inp: Path, out: Path, topk: int) -> int:
    queries = load_queries(inp)
    logger.info("Loaded {} queries from {}", len(queries), inp)

    unique_queries = _dedup_preserve_order(queries)
    logger.info("Unique queries to evaluate: {}", len(unique_queries))

    unique_preds: Dict[str, List[Tuple[str, int]]] = {}
    for i, uq in enumerate(unique_queries, 1):
        try:
            unique_preds[uq] = _predict_for_query(uq, topk)
        except Exception as e:
            logger.warning("{}/{} failed: {}", i, len(unique_queries), e)
            unique_preds[uq] = []

    write_results_csv(unique_preds, queries, out)
    total_rows = sum(len(unique_preds.get(q, [])) for q in queries)
    logger.info("Wrote {} rows to {}", total_rows, out)
    return total_rows


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Rank catalog programs for free-text interests.")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--query", type=str, help="single description to match")
    group.add_argument("--in", dest="inp", type=str, help="CSV/XLSX file with a Query column")
    ap.add_argument("--out", dest="out", type=str, default="artifacts/match_results.csv",
                    help="output CSV for batch mode")
    ap.add_argument("--topk", type=int, default=10, help="max programs per query (default 10)")
    args = ap.parse_args(argv)

    if args.query is not None:
        results = match_single_query(args.query)[:args.topk]
        if not results:
            print("No programs matched.")
        for r in results:
            print(f"{r.score:>3}  {r.entry.id:<28} {r.entry.name}")
        return

    run_batch(Path(args.inp), Path(args.out), args.topk)


if __name__ == "__main__":
    main()

"""Adjacency merger — collapse runs of contiguous filled cells within a row."""

from __future__ import annotations

from dataclasses import replace

from codeblocks.engine.grid import Column


def merge_row_columns(columns: list[Column]) -> list[Column]:
    """Greedy left-to-right merge of contiguous filled Columns.

    A run absorbs each following Column while it is filled and starts exactly
    where the run ends. Unfilled Columns pass through one-for-one. The input
    list and its Columns are left untouched.
    """
    merged: list[Column] = []
    i = 0
    n = len(columns)
    while i < n:
        current = replace(columns[i])
        i += 1
        if current.fill:
            while i < n and columns[i].fill and columns[i].start_x == current.end_x:
                current.block_width += columns[i].block_width
                i += 1
        merged.append(current)
    return merged

from collections import deque

from mazegen.maze import Maze


def assert_all_reachable(maze: Maze) -> None:
    cells = maze.cell_positions()
    if not cells:
        return
    seen = {cells[0]}
    queue = deque([cells[0]])
    while queue:
        cur = queue.popleft()
        for nxt in maze.neighbors(cur):
            if nxt not in seen and maze.is_connected(cur, nxt):
                seen.add(nxt)
                queue.append(nxt)
    assert len(seen) == len(cells), f"reached {len(seen)} of {len(cells)} cells"


def assert_perfect_maze(maze: Maze) -> None:
    """Spanning tree over the active cells: n - 1 passages and everything reachable."""
    cells = maze.cell_positions()
    edges = list(maze.connections())
    assert len(edges) == max(len(cells) - 1, 0), f"{len(edges)} passages for {len(cells)} cells"
    for a, b in edges:
        assert maze.is_cell(a) and maze.is_cell(b)
        assert b in maze.neighbors(a), f"{a} and {b} are not adjacent"
        assert maze.is_connected(b, a), "connectivity must be symmetric"
    assert_all_reachable(maze)

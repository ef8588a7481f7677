# coding:utf-8
from typing import List, Tuple

from .stone import BOARD_SIZE, WIN_LENGTH, StoneColor

# 横、竖、斜（左上到右下）、反斜（右上到左下）四个方向
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


def in_bounds(row, col, size=BOARD_SIZE):
    return 0 <= row < size and 0 <= col < size


def _run(board, row, col, player, d_row, d_col) -> List[Tuple[int, int]]:
    """沿一个方向统计连续同色棋子（不含起点），遇到边界或异色即停止"""
    size = len(board)
    positions = []
    r, c = row + d_row, col + d_col
    while in_bounds(r, c, size) and board[r][c] == player:
        positions.append((r, c))
        r += d_row
        c += d_col
    return positions


def axis_line(board, row, col, player, d_row, d_col) -> List[Tuple[int, int]]:
    """返回经过 (row, col) 的某条轴线上的连续棋子位置，按从反方向到正方向排序"""
    backward = _run(board, row, col, player, -d_row, -d_col)
    forward = _run(board, row, col, player, d_row, d_col)
    return list(reversed(backward)) + [(row, col)] + forward


def axis_count(board, row, col, player, d_row, d_col):
    """某条轴线上的连子数，包括 (row, col) 本身"""
    return (1 + len(_run(board, row, col, player, d_row, d_col))
            + len(_run(board, row, col, player, -d_row, -d_col)))


def check_win(board, row, col, player):
    """检查以 (row, col) 为最后落子点时 player 是否获胜

    只检查经过该点的四条轴线，不扫描整个棋盘。
    连子数 >= 5 即获胜，长连同样算胜。
    """
    for d_row, d_col in DIRECTIONS:
        if axis_count(board, row, col, player, d_row, d_col) >= WIN_LENGTH:
            return True
    return False


def winning_line(board, row, col, player) -> List[Tuple[int, int]]:
    """返回第一条达成五连的轴线上的全部位置，未获胜时返回空列表"""
    for d_row, d_col in DIRECTIONS:
        line = axis_line(board, row, col, player, d_row, d_col)
        if len(line) >= WIN_LENGTH:
            return line
    return []


def is_board_full(board):
    return all(cell is not StoneColor.EMPTY for line in board for cell in line)

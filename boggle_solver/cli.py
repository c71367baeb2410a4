"""
Command-line front end for the Boggle solver.

Usage:
    boggle-solver solve <dictionary> <board_file> [--variant rway|ternary] [--max-results N]
    boggle-solver score <dictionary> WORD [WORD ...]
    boggle-solver serve [--port N]

Examples:
    boggle-solver solve dictionary.txt board4x4.txt
    boggle-solver score dictionary.txt QUIZ CATS
    boggle-solver serve --port 8080

The board file starts with the row and column counts, followed by one token
per cell; "Qu" marks the Q cube:

    4 4
    A T E E
    A P Y O
    T I N U
    E D S Qu
"""
import argparse
import logging
import sys

from boggle_solver.settings import settings

logger = logging.getLogger("boggle")


def _cmd_solve(args) -> int:
    from boggle_solver.board import load_board
    from boggle_solver.solver import BoggleSolver

    solver = BoggleSolver.from_file(args.dictionary, args.variant)
    board = load_board(args.board)
    words, score = solver.solve(board, args.max_results)
    for word in words:
        print(word)
    print(f"Score = {score}")
    return 0


def _cmd_score(args) -> int:
    from boggle_solver.solver import BoggleSolver

    solver = BoggleSolver.from_file(args.dictionary, args.variant)
    for word in args.words:
        word = word.upper()
        points = solver.score_of(word) if word.isascii() and word.isalpha() else 0
        print(f"{word}: {points}")
    return 0


def _cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("boggle_solver.server:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boggle-solver", description="Find and score every word on a Boggle board")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="List every word on a board and the total score")
    p_solve.add_argument("dictionary", help="Word list, whitespace separated")
    p_solve.add_argument("board", help="Board file: 'ROWS COLS' then one token per cell")
    p_solve.add_argument("--variant", choices=["rway", "ternary"], default=settings.TRIE_VARIANT,
                         help=f"Dictionary trie implementation (default: {settings.TRIE_VARIANT})")
    p_solve.add_argument("--max-results", type=int, default=0,
                         help="Print at most N words, longest first (default: all)")
    p_solve.set_defaults(func=_cmd_solve)

    p_score = sub.add_parser("score", help="Score individual words against the dictionary")
    p_score.add_argument("dictionary", help="Word list, whitespace separated")
    p_score.add_argument("words", nargs="+", metavar="WORD")
    p_score.add_argument("--variant", choices=["rway", "ternary"], default=settings.TRIE_VARIANT)
    p_score.set_defaults(func=_cmd_score)

    p_serve = sub.add_parser("serve", help="Run the HTTP solver service")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=settings.PORT,
                         help=f"Port to listen on (default: {settings.PORT})")
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    from boggle_solver.board import InvalidBoardError

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        return args.func(args)
    except (OSError, InvalidBoardError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

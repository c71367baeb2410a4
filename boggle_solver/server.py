import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from boggle_solver.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_solver = None


def _parse_board(body):
    from boggle_solver.board import GridBoard, InvalidBoardError

    rows = body.get("board") if isinstance(body, dict) else None
    if not isinstance(rows, list) or not rows:
        raise HTTPException(400, "Request body must be a JSON object with a non-empty 'board' list")
    try:
        return GridBoard([list(row) if isinstance(row, str) else row for row in rows])
    except (InvalidBoardError, TypeError) as e:
        raise HTTPException(400, f"Invalid board: {e}") from None


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _solver

        from boggle_solver.solver import BoggleSolver
        logger.info("Loading dictionary from %s (variant=%s)", settings.DICTIONARY_PATH, settings.TRIE_VARIANT)
        _solver = BoggleSolver.from_file(settings.DICTIONARY_PATH, settings.TRIE_VARIANT)
        logger.info("Dictionary loaded")

        yield

        _solver = None

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "dictionary_loaded": _solver is not None,
            "word_count": len(_solver) if _solver is not None else 0,
        }

    @application.post("/solve")
    async def solve(request: Request):
        from boggle_solver.metrics import SolveStats

        if _solver is None:
            raise HTTPException(503, "Dictionary not loaded")

        stats = SolveStats()

        with stats.timed("parse"):
            try:
                body = await request.json()
            except ValueError:
                raise HTTPException(400, "Request body is not valid JSON") from None
            board = _parse_board(body)
            cells = board.rows * board.cols
            if cells > settings.MAX_BOARD_CELLS:
                raise HTTPException(413, f"Board too large ({cells} cells, max {settings.MAX_BOARD_CELLS})")
            stats.record(cells=cells)

        logger.info("Board %dx%d: %s", board.rows, board.cols, " / ".join(board.to_rows()))

        with stats.timed("solve"):
            found = _solver.get_all_valid_words(board)

        with stats.timed("score"):
            score = _solver.total_score(found)

        all_words = sorted(found, key=lambda w: (-len(w), w))
        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        stats.record(words=len(all_words), score=score)
        stats.log_summary()

        result = {
            "rows": board.rows,
            "cols": board.cols,
            "board": board.to_rows(),
            "words": words,
            "word_count": len(words),
            "total_words": len(all_words),
            "score": score,
            "processing_time": stats.elapsed_ms,
        }
        if settings.INCLUDE_TIMINGS:
            result["stage_timings"] = stats.stage_timings()
        return JSONResponse(result)

    @application.get("/score")
    async def score(word: str):
        if _solver is None:
            raise HTTPException(503, "Dictionary not loaded")
        word = word.strip().upper()
        return {"word": word, "score": _solver.score_of(word) if word.isascii() and word.isalpha() else 0}

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle_solver.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle_solver.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body is not valid JSON") from None
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()

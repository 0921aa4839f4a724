"""Main application with health and progress endpoints."""

from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException

from stepmaster import __version__
from stepmaster.config import settings
from stepmaster.exceptions import InvalidGoalError
from stepmaster.health import create_health_router
from stepmaster.logging import setup_logging
from stepmaster.progress import (
    Badge,
    DailyChallenge,
    DailyStats,
    ProgressReport,
    calculate_streak,
    get_badges,
    get_daily_challenge,
    get_level,
    lifetime_steps,
)
from stepmaster.schemas import (
    GoalUpdate,
    HistoryResponse,
    LevelResponse,
    SampleBatch,
    SampleBatchResult,
    StreakResponse,
    WaterChange,
    WaterCount,
)
from stepmaster.sources import JsonFileHistoryStore, ManualSensorSource
from stepmaster.tracker import ActivityTracker


def create_app(tracker: Optional[ActivityTracker] = None) -> FastAPI:
    """Build the API around ``tracker``, or a file-backed tracker if omitted."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger = setup_logging(settings)

        if app.state.tracker is None:
            app.state.tracker = ActivityTracker(
                sensor=ManualSensorSource(),
                store=JsonFileHistoryStore(settings.history_file),
            )
        app.state.tracker.start()
        logger.info("StepMaster started", version=__version__)

        yield

        app.state.tracker.stop()

    app = FastAPI(
        title="StepMaster",
        description="Step counting, activity classification and progress analytics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.tracker = tracker

    app.include_router(create_health_router(lambda: app.state.tracker))

    # Tracker calls block on its lock and on file writes, so the handlers below
    # that use it are plain functions and run in the threadpool
    def get_tracker() -> ActivityTracker:
        if app.state.tracker is None or not app.state.tracker.running:
            raise HTTPException(status_code=503, detail="Tracker not running")
        return app.state.tracker

    @app.get("/")
    async def root():
        return {"service": settings.service_name, "version": __version__}

    @app.get("/activity")
    def activity():
        """Current activity label and detector counters."""
        return get_tracker().status()

    @app.post("/samples", response_model=SampleBatchResult)
    def ingest_samples(batch: SampleBatch):
        """Run samples through the step detector in order."""
        tracker = get_tracker()
        accepted = dropped = steps = 0
        for sample in batch.samples:
            result = tracker.process_sample(sample)
            if result.accepted:
                accepted += 1
            else:
                dropped += 1
            if result.step_detected:
                steps += 1

        return SampleBatchResult(
            accepted=accepted,
            dropped=dropped,
            steps_detected=steps,
            activity=tracker.activity,
            today_steps=tracker.today_steps(),
        )

    @app.get("/history", response_model=HistoryResponse)
    def history():
        store = get_tracker().store
        return HistoryResponse(history=store.get_history(), goal=store.get_goal())

    @app.get("/progress", response_model=ProgressReport)
    def progress():
        return get_tracker().progress_report()

    @app.get("/level", response_model=LevelResponse)
    def level():
        total = lifetime_steps(get_tracker().store.get_history())
        return LevelResponse(lifetime_steps=total, level=get_level(total))

    @app.get("/streak", response_model=StreakResponse)
    def streak():
        tracker = get_tracker()
        today = tracker.clock.today()
        return StreakResponse(
            date=today, streak=calculate_streak(tracker.store.get_history(), today)
        )

    @app.get("/challenge", response_model=DailyChallenge)
    def challenge():
        tracker = get_tracker()
        today = tracker.clock.today()
        return get_daily_challenge(
            tracker.store.get_goal(), tracker.store.get_today_steps(today), today
        )

    @app.get("/badges", response_model=List[Badge])
    def badges():
        tracker = get_tracker()
        return get_badges(tracker.store.get_history(), tracker.clock.today())

    @app.get("/stats", response_model=DailyStats)
    def stats():
        return get_tracker().daily_stats()

    @app.put("/goal", response_model=HistoryResponse)
    def update_goal(update: GoalUpdate):
        store = get_tracker().store
        try:
            store.save_goal(update.goal)
        except InvalidGoalError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return HistoryResponse(history=store.get_history(), goal=store.get_goal())

    @app.post("/water", response_model=WaterCount)
    def water(change: WaterChange):
        tracker = get_tracker()
        count = tracker.add_water(change.change)
        return WaterCount(date=tracker.clock.today(), water_glasses=count)

    @app.post("/reset-today", response_model=DailyStats)
    def reset_today():
        tracker = get_tracker()
        tracker.reset_today()
        return tracker.daily_stats()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "stepmaster.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

"""
Daily rollover of the in-memory event log
"""
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
import logging

from soil_server.state import TelemetryState

logger = logging.getLogger(__name__)
scheduler = BackgroundScheduler()

def roll_over_event_log(state: TelemetryState):
    """Start a fresh event log for the new day"""
    try:
        dropped = state.clear_events()
        logger.info(f"Event log rolled over, {dropped} entries dropped")
    except Exception as e:
        logger.error(f"Error rolling over event log: {str(e)}")

def start_scheduler(state: TelemetryState):
    """Start the rollover job, firing at local midnight"""
    if not scheduler.running:
        scheduler.add_job(
            roll_over_event_log,
            CronTrigger(hour=0, minute=0),
            args=[state],
            id='event_log_rollover',
            replace_existing=True
        )
        scheduler.start()
        logger.info("Event log rollover scheduler started (daily at 00:00)")

def stop_scheduler():
    """Stop the scheduler"""
    if scheduler.running:
        scheduler.shutdown()
        logger.info("Event log rollover scheduler stopped")

"""Serve the holiday agent over A2A with uvicorn."""

import logging

import uvicorn

from a2a_server.app import DEFAULT_AGENT_ID, create_app
from agent.holiday_agent import HolidayAgentRunner, create_agent
from core.config import load_settings
from core.queries import HolidayService


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    runner = HolidayAgentRunner(create_agent(settings))
    app = create_app(
        {DEFAULT_AGENT_ID: runner},
        HolidayService.from_settings(settings),
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

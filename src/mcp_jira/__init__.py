import asyncio
import os
import sys

import click
from click.core import ParameterSource
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import log_operation, setup_logger

# Set up the contextual logger before any component logger is created
logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """MCP Jira Server - Jira Cloud tools for MCP agents."""
    # The .env file may carry LOG_LEVEL and LOG_FORMAT, so it is read first
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    # Without -v flags the level comes from LOG_LEVEL
    logging_level = {0: None, 1: "INFO"}.get(verbose, "DEBUG")

    setup_logger(
        name="mcp-jira",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        logger.info(f"Environment loaded from {env_file or 'default .env file'}")

        # Command line arguments take precedence over the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_email:
            os.environ["JIRA_API_MAIL"] = jira_email
        if jira_token:
            os.environ["JIRA_API_KEY"] = jira_token
        ssl_source = click.get_current_context().get_parameter_source("jira_ssl_verify")
        if ssl_source is not ParameterSource.DEFAULT:
            os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

        from . import server

        logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")

    try:
        asyncio.run(server.run_server(transport=transport, port=port))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Error running server: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()

"""
Local development server for the recommendation gateway.

Serves the gateway on aiohttp so the composer can be pointed at it
without deploying the Lambda handler. Usage:

    python -m travel_recommender.server
"""

from aiohttp import web

from travel_recommender.config import GatewayConfig, load_config
from travel_recommender.gateway import RecommendationGateway
from travel_recommender.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

RECOMMENDATIONS_PATH = "/api/getRecommendations"
GATEWAY_KEY = web.AppKey("gateway", RecommendationGateway)


async def get_recommendations(request: web.Request) -> web.Response:
    gateway = request.app[GATEWAY_KEY]
    body = await request.text() if request.can_read_body else None
    response = await gateway.handle(request.method, body)
    return web.json_response(response.payload, status=response.status_code)


def create_app(config: GatewayConfig | None = None) -> web.Application:
    """
    Build the aiohttp application.

    Args:
        config: Gateway configuration; read from the environment if omitted

    Returns:
        Application routing every method on the recommendations path to
        the gateway, which answers non-POST calls itself
    """
    app = web.Application()
    app[GATEWAY_KEY] = RecommendationGateway(config or GatewayConfig.from_env())
    app.router.add_route("*", RECOMMENDATIONS_PATH, get_recommendations)
    return app


def main():
    config = load_config()
    setup_logging(config.system)
    config.validate()

    logger.info(
        f"Serving gateway on http://{config.system.host}:{config.system.port}"
        f"{RECOMMENDATIONS_PATH}"
    )
    web.run_app(
        create_app(config.gateway),
        host=config.system.host,
        port=config.system.port,
        print=None,
    )


if __name__ == "__main__":
    main()

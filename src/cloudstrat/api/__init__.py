"""HTTP API for strategy lookups."""

from cloudstrat.api.app import create_app

__all__ = ["create_app"]

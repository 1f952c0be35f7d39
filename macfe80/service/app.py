#!/usr/bin/env python3
"""macfe80 HTTP service"""

import argparse
import os
from typing import Dict, List, Optional, Tuple

from flask import Flask
from flask import request
from voluptuous import Invalid, MultipleInvalid, Optional as VolOptional, Required, Schema
from waitress import serve

from macfe80.common import logger
from macfe80.config import config
from macfe80.converter.converter import (
    convert_mac_to_eui64,
    eui64_ipv6_link_local,
    eui64_to_ipv6_format,
)
from macfe80.service.tool import MAC_TO_EUI64

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")

app = Flask(__name__)
app.config["MACFE80_IPV6_DEFAULT"] = False


def parse_bool(value: str) -> bool:
    """Parses a query string flag.

    Raises:
        voluptuous.Invalid: If value is not a recognised boolean.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise Invalid(f"Not a boolean value: {value}")


MAC_EUI64_SCHEMA_V1 = Schema({Required("mac"): str, VolOptional("ipv6"): bool})
MAC_EUI64_QUERY_SCHEMA_V1 = Schema({VolOptional("ipv6"): parse_bool})


def _error(message: str) -> Tuple[Dict, int]:
    return {"error": {"message": message}}, 400


def _convert(mac: str, ipv6: Optional[bool]) -> Tuple[Dict, int]:
    """Runs the conversion pipeline and builds the response body.

    Arguments:
        mac: The MAC address to convert.
        ipv6: Whether to build the modified EUI-64, None for the configured default.
    Returns:
        The response body and HTTP status.
    """
    if ipv6 is None:
        ipv6 = app.config["MACFE80_IPV6_DEFAULT"]
    eui64 = convert_mac_to_eui64(mac, ipv6)
    if eui64 is None:
        logger.warning("Refusing to convert invalid MAC address %r", mac)
        return _error(f"{mac} does not appear to be a correctly formatted mac address")
    logger.info(f"Converted {mac} to {eui64} (ipv6={ipv6})")
    return {
        "mac": mac,
        "ipv6": ipv6,
        "eui64": eui64,
        "ipv6_format": eui64_to_ipv6_format(eui64),
        "link_local": eui64_ipv6_link_local(eui64),
    }, 200


@app.route("/", methods=["GET"])
def index() -> Dict:
    """Returns the tool descriptor."""
    return MAC_TO_EUI64.to_dict()


@app.route("/api/v1/mac/eui64", methods=["POST"])
def mac_api_v1_eui64() -> Tuple[Dict, int]:
    """Converts the MAC address in the JSON body.

    Returns:
        The EUI-64, IPv6 formatted and link-local addresses, or an error message.
    """
    try:
        data = MAC_EUI64_SCHEMA_V1(request.get_json(force=True, silent=True))
    except MultipleInvalid as ex:
        logger.warning("Invalid request to /api/v1/mac/eui64: %s", ex)
        return _error(str(ex))
    return _convert(data["mac"], data.get("ipv6"))


@app.route("/api/v1/mac/<mac>/eui64", methods=["GET"])
def mac_api_v1_eui64_get(mac: str) -> Tuple[Dict, int]:
    """Converts the MAC address in the URL."""
    try:
        args = MAC_EUI64_QUERY_SCHEMA_V1(request.args.to_dict())
    except MultipleInvalid as ex:
        logger.warning("Invalid request to /api/v1/mac/%s/eui64: %s", mac, ex)
        return _error(str(ex))
    return _convert(mac, args.get("ipv6"))


def main(argv: Optional[List[str]] = None):
    """Loads the configuration and serves the app with waitress."""
    parser = argparse.ArgumentParser(description="MAC to EUI-64 conversion service")
    parser.add_argument(
        "-c",
        "--config",
        help="Load configuration from CONFIG File",
        default=None,
    )
    args = parser.parse_args(argv)
    if args.config:
        os.environ[config.MACFE80_CONFIG_OS_ENV] = args.config

    cfg = config.get_config()
    app.config["MACFE80_IPV6_DEFAULT"] = cfg.ipv6_default
    logger.info(f"Listening on {cfg.listen.host}:{cfg.listen.port}")
    serve(app, host=cfg.listen.host, port=cfg.listen.port)


if __name__ == "__main__":
    main()

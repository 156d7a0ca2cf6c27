import argparse
import json
import sys

import httpx

from gauges_connector.core.exceptions import ConfigurationError
from gauges_connector.core.logger import get_logger
from gauges_connector.gauges.factory import create_client_from_env

log = get_logger(__name__)


def print_response(label: str, response: httpx.Response) -> None:
    print(f"\n=== {label} (status={response.status_code}) ===")
    try:
        print(json.dumps(response.json(), indent=2, ensure_ascii=False))
    except ValueError:
        # Body vide ou non JSON
        print(response.text)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Affiche le compte et les gauges via l'API Gaug.es.")
    parser.add_argument("--page", type=int, default=None, help="Page de la liste des gauges")
    args = parser.parse_args(argv)

    try:
        client = create_client_from_env(logger=log)
    except ConfigurationError as e:
        log.error(str(e))
        return 1

    with client:
        print_response("Compte", client.get_profile())
        print_response("Gauges", client.list_gauges(page=args.page))

    return 0


if __name__ == "__main__":
    sys.exit(main())

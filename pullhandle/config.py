import json
import logging
import os
from typing import Any, Dict, Optional

from pullhandle.errors import NoGithubCredentials
from pullhandle.http_client import BasicAuthRequester, Requester, TokenAuthRequester
from pullhandle.repos import Repo

log = logging.getLogger(__name__)


def load_config(filename: Optional[str]) -> Dict[str, Any]:
    config: Dict[str, Any] = {}
    if filename is not None:
        config_path = os.path.abspath(filename)
        try:
            with open(config_path) as f:
                config = json.loads(f.read())
            if not isinstance(config, dict):
                log.error("Config file %s is not a JSON object", config_path)
                config = {}
        except IOError:
            log.error("Could not open config file %s", config_path)
        except ValueError:
            log.error("Could not parse config file %s", config_path)
    return config


def configure_logging(debug: bool = False) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig()


def build_requester(config: Dict[str, Any]) -> Requester:
    """
    Picks credentials out of the config, falling back to GITHUB_USERNAME /
    GITHUB_PASSWORD / GITHUB_TOKEN in the environment. A token wins over a
    username and password.
    """
    timeout = config.get("timeout")
    token = config.get("github_token") or os.environ.get("GITHUB_TOKEN")
    if token:
        return TokenAuthRequester(token, timeout=timeout)
    username = config.get("github_username") or os.environ.get("GITHUB_USERNAME")
    password = config.get("github_password") or os.environ.get("GITHUB_PASSWORD")
    if username and password:
        return BasicAuthRequester(username, password, timeout=timeout)
    raise NoGithubCredentials()


def build_repo(config: Dict[str, Any], requester: Optional[Requester] = None) -> Repo:
    if requester is None:
        requester = build_requester(config)
    return Repo(requester, config["repo_name"], domain=config.get("github_domain"))

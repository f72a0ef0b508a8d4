import os
import ssl
from typing import Any, Dict, Optional

import certifi
import truststore

CA_BUNDLE_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
CA_DIR_ENV_VAR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def _ca_bundle() -> Optional[str]:
    for name in CA_BUNDLE_ENV_VARS:
        path = _env_path(name)
        if path:
            return path
    return None


def get_httpx_client_kwargs(timeout: float) -> Dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients.

    An explicit CA bundle or directory from the environment pins verification
    to those certificates (with certifi's bundle when only a directory is
    given). Otherwise the operating system trust store is used.
    """
    ca_bundle = _ca_bundle()
    ca_dir = _env_path(CA_DIR_ENV_VAR)

    verify: ssl.SSLContext
    if ca_bundle or ca_dir:
        verify = ssl.create_default_context(
            cafile=ca_bundle or certifi.where(), capath=ca_dir
        )
    else:
        verify = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    return {
        "verify": verify,
        "timeout": timeout,
        "follow_redirects": True,
    }

import os
from typing import Dict, Optional

DEFAULT_BASE_URL = "https://api.thecatapi.com/v1/"
DEFAULT_CDN_URL = "https://cdn2.thecatapi.com/images/"
DEMO_API_KEY = "DEMO-API-KEY"
DEFAULT_TIMEOUT = 30.0


def _read_env(path: Optional[str] = None) -> Dict[str, str]:
    env: Dict[str, str] = {}
    path = path or os.path.join(os.getcwd(), ".env")
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                env[k.strip()] = v.strip().strip('"').strip("'")
    return env


def _with_slash(url: str) -> str:
    return url.rstrip("/") + "/"


class KittyConfig:
    """
    Connection settings for TheCatAPI.

    Passed explicitly to the clients so tests can point them at a mock
    service instead of the real one.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        cdn_url: str = DEFAULT_CDN_URL,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        timeout = float(timeout)
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._base_url = _with_slash(base_url)
        self._cdn_url = _with_slash(cdn_url)
        self._api_key = api_key or ""
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def cdn_url(self) -> str:
        return self._cdn_url

    @property
    def api_key(self) -> str:
        return self._api_key or DEMO_API_KEY

    @property
    def timeout(self) -> float:
        return self._timeout

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "KittyConfig":
        """Build a config from ``.env`` (wins) and the process environment."""
        env = _read_env(env_file)

        def lookup(key: str, default: str) -> str:
            return env.get(key) or os.environ.get(key) or default

        return cls(
            base_url=lookup("CAT_API_BASE_URL", DEFAULT_BASE_URL),
            cdn_url=lookup("CAT_API_CDN_URL", DEFAULT_CDN_URL),
            api_key=lookup("CAT_API_KEY", ""),
            timeout=float(lookup("CAT_API_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    def __repr__(self) -> str:
        return f"KittyConfig(base_url={self._base_url!r}, cdn_url={self._cdn_url!r}, timeout={self._timeout})"

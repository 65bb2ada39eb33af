"""python -m backend  ➜ serve the gateway on the configured port."""
import logging
import uvicorn

from backend.api.app import create_app
from backend.utils.paths import load_config

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    conf = load_config()
    uvicorn.run(create_app(conf), host="0.0.0.0", port=conf.port)

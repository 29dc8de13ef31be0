import json
import os
import tempfile

from ...application.ports.pricing_store import PricingStore
from ...application.ports.pricing_source import PricingFixture


class JsonFilePricingStore(PricingStore):
    def __init__(self, path: str) -> None:
        self.path = path

    def save(self, prices: PricingFixture) -> str:
        payload = json.dumps(prices, indent=2, ensure_ascii=False)
        dest_dir = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(dest_dir, exist_ok=True)
        # write beside the target and rename so the file is never seen half-written
        fd, tmp_path = tempfile.mkstemp(prefix=".prices-", suffix=".tmp", dir=dest_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        return self.path

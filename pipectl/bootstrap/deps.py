from functools import lru_cache

from pipectl.core.ctl import PipeCtl


@lru_cache
def get_ctl() -> PipeCtl:
    return PipeCtl()

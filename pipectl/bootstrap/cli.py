from collections.abc import Sequence

from pipectl.bootstrap.deps import get_ctl
from pipereq.core.helpers.utils import scan


@scan("pipectl.bootstrap.commands")
def main(argv: Sequence[str] | None = None) -> int:
    return get_ctl().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())

from typing import Any, cast

# Sentinel value for arguments that were not passed, since None is a valid seed
UNSET = cast(Any, object())

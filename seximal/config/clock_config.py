# seximal/config/clock_config.py
from typing import Optional

from pydantic import BaseModel

from seximal.common.forms import SeximalForm


class ClockConfig(BaseModel):
    local: bool = False
    timezone: Optional[str] = None     # IANA 名称，优先于 local
    form: SeximalForm = SeximalForm.EXTENDED

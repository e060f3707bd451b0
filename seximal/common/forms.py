# seximal/common/forms.py
from enum import Enum


class SeximalForm(str, Enum):
    EXTENDED = "extended"    # LP:LL:MT.SN
    SNAPSHOT = "snapshot"    # 7 位，basic form
    SPAN = "span"            # 3 位

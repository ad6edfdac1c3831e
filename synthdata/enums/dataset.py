from enum import Enum


class DatasetSource(str, Enum):
    file = "file"
    template = "template"


class DataType(str, Enum):
    tabular = "tabular"


class DatasetStatus(str, Enum):
    uploaded = "uploaded"

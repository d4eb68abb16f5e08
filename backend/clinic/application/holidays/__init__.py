from .create_holiday import create_holiday
from .import_national_holidays import import_national_holidays, HolidayImportError

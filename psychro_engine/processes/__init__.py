from .results import HeatingResult, CoolingResult, MixingResult, MultiStreamMixingResult

from .heating import Heating

from .cooling import CoolantData, DryCooling, Cooling

from .mixing import AdiabaticMixing, MultiStreamMixing, TargetMixing

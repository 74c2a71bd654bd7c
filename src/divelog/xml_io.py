"""
Reading and writing dive logs as XML.

Values carry their unit in the attribute text, e.g. ``depth max='30.5 m'``,
``duration='45:30 min'`` or ``o2='32.0%'``. Depths and pressures may be given
in metric or imperial units; they are stored internally as mm, mbar, ml
and mK.
"""

import calendar
import logging
import re
import time
import xml.etree.ElementTree as ET

from divelog.dive import MAX_CYLINDERS, Cylinder, Dive, GasMix, Sample
from divelog.errors import ParseError

logger = logging.getLogger(__name__)

_value_re = re.compile(r"^\s*([-+]?[0-9]*\.?[0-9]+)\s*([^\s]*)\s*$")


def _split_value(text):
    match = _value_re.match(text)
    if match is None:
        raise ValueError(f"cannot parse value {text!r}")
    return float(match.group(1)), match.group(2).lower()


def parse_depth(text):
    value, unit = _split_value(text)
    if unit in ("", "m"):
        return round(value * 1000)
    if unit in ("ft", "feet"):
        return round(value * 304.8)
    raise ValueError(f"unknown depth unit in {text!r}")


def parse_duration(text):
    text = text.strip()
    if text.endswith("min"):
        text = text[: -len("min")].strip()
    if ":" in text:
        minutes, seconds = text.split(":", 1)
        return int(minutes) * 60 + int(seconds)
    return round(float(text) * 60)


def parse_temperature(text):
    value, unit = _split_value(text)
    if unit in ("", "c"):
        return round(value * 1000 + 273150)
    if unit == "f":
        return round((value + 459.67) * 5000 / 9)
    if unit == "k":
        return round(value * 1000)
    raise ValueError(f"unknown temperature unit in {text!r}")


def parse_pressure(text):
    value, unit = _split_value(text)
    if unit in ("", "bar"):
        return round(value * 1000)
    if unit == "psi":
        return round(value * 68.947573)
    raise ValueError(f"unknown pressure unit in {text!r}")


def parse_volume(text):
    value, unit = _split_value(text)
    if unit in ("", "l"):
        return round(value * 1000)
    if unit in ("cuft", "ft3"):
        return round(value * 28316.8)
    raise ValueError(f"unknown volume unit in {text!r}")


def parse_percent(text):
    value, unit = _split_value(text)
    if unit not in ("", "%"):
        raise ValueError(f"unknown fraction in {text!r}")
    return round(value * 10)


def parse_when(date, time_of_day):
    time_of_day = time_of_day or "00:00:00"
    if time_of_day.count(":") == 1:
        time_of_day += ":00"
    tm = time.strptime(f"{date} {time_of_day}", "%Y-%m-%d %H:%M:%S")
    return calendar.timegm(tm)


def _text(element, tag):
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def _parse_cylinder(element):
    attrib = element.attrib
    cylinder = Cylinder(description=attrib.get("description"))
    if "size" in attrib:
        cylinder.size = parse_volume(attrib["size"])
    if "workpressure" in attrib:
        cylinder.workpressure = parse_pressure(attrib["workpressure"])
    if "start" in attrib:
        cylinder.start = parse_pressure(attrib["start"])
    if "end" in attrib:
        cylinder.end = parse_pressure(attrib["end"])
    cylinder.gasmix = GasMix(
        o2=parse_percent(attrib.get("o2", "0")), he=parse_percent(attrib.get("he", "0"))
    )
    return cylinder


def _parse_sample(element):
    attrib = element.attrib
    sample = Sample(
        time=parse_duration(attrib["time"]), depth=parse_depth(attrib["depth"])
    )
    if "temp" in attrib:
        sample.temperature = parse_temperature(attrib["temp"])
    if "pressure" in attrib:
        sample.pressure = parse_pressure(attrib["pressure"])
    return sample


def parse_dive(element):
    attrib = element.attrib
    dive = Dive(number=int(attrib.get("number", 0)))
    if "date" in attrib:
        dive.when = parse_when(attrib["date"], attrib.get("time"))
    if "duration" in attrib:
        dive.duration = parse_duration(attrib["duration"])

    depth = element.find("depth")
    if depth is not None:
        if "max" in depth.attrib:
            dive.maxdepth = parse_depth(depth.attrib["max"])
        if "mean" in depth.attrib:
            dive.meandepth = parse_depth(depth.attrib["mean"])

    temperature = element.find("temperature")
    if temperature is not None and "water" in temperature.attrib:
        dive.watertemp = parse_temperature(temperature.attrib["water"])

    for field in ["location", "buddy", "divemaster", "notes"]:
        setattr(dive, field, _text(element, field))

    cylinders = element.findall("cylinder")
    if len(cylinders) > MAX_CYLINDERS:
        raise ValueError(f"more than {MAX_CYLINDERS} cylinders")
    for i, cylinder in enumerate(cylinders):
        dive.cylinders[i] = _parse_cylinder(cylinder)

    dive.samples = [_parse_sample(sample) for sample in element.iter("sample")]
    return dive


def parse_file(path):
    logger.debug(f"parsing {path}")
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse: {e}", filename=str(path)) from e
    except OSError as e:
        raise ParseError(f"Failed to open: {e.strerror}", filename=str(path)) from e

    if root.tag == "dive":
        elements = [root]
    else:
        elements = list(root.iter("dive"))

    dives = []
    for element in elements:
        try:
            dives.append(parse_dive(element))
        except (KeyError, ValueError) as e:
            raise ParseError(f"Bad dive record: {e}", filename=str(path)) from e
    logger.info(f"read {len(dives)} dives from {path}")
    return dives


def _mm(value):
    return f"{value / 1000:.2f} m"


def _mbar(value):
    return f"{value / 1000:.1f} bar"


def _mkelvin(value):
    return f"{(value - 273150) / 1000:.1f} C"


def _seconds(value):
    return f"{value // 60}:{value % 60:02d} min"


def _permille(value):
    return f"{value / 10:.1f}%"


def _last_used_slot(dive: Dive):
    for i in reversed(range(len(dive.cylinders))):
        if not dive.cylinders[i].is_empty:
            return i
    return -1


def dive_element(dive: Dive):
    tm = time.gmtime(dive.when)
    attrib = {
        "date": time.strftime("%Y-%m-%d", tm),
        "time": time.strftime("%H:%M:%S", tm),
        "duration": _seconds(dive.duration),
    }
    if dive.number:
        attrib = {"number": str(dive.number), **attrib}
    element = ET.Element("dive", attrib)

    depth = {"max": _mm(dive.maxdepth)}
    if dive.meandepth:
        depth["mean"] = _mm(dive.meandepth)
    ET.SubElement(element, "depth", depth)

    if dive.watertemp:
        ET.SubElement(element, "temperature", {"water": _mkelvin(dive.watertemp)})

    for field in ["location", "buddy", "divemaster", "notes"]:
        value = getattr(dive, field)
        if value:
            ET.SubElement(element, field).text = value

    for cylinder in dive.cylinders[: _last_used_slot(dive) + 1]:
        attrib = {}
        if cylinder.size:
            attrib["size"] = f"{cylinder.size / 1000:.1f} l"
        if cylinder.workpressure:
            attrib["workpressure"] = _mbar(cylinder.workpressure)
        if cylinder.description:
            attrib["description"] = cylinder.description
        if cylinder.start:
            attrib["start"] = _mbar(cylinder.start)
        if cylinder.end:
            attrib["end"] = _mbar(cylinder.end)
        if cylinder.gasmix.o2:
            attrib["o2"] = _permille(cylinder.gasmix.o2)
        if cylinder.gasmix.he:
            attrib["he"] = _permille(cylinder.gasmix.he)
        ET.SubElement(element, "cylinder", attrib)

    for sample in dive.samples:
        attrib = {"time": _seconds(sample.time), "depth": _mm(sample.depth)}
        if sample.temperature:
            attrib["temp"] = _mkelvin(sample.temperature)
        if sample.pressure:
            attrib["pressure"] = _mbar(sample.pressure)
        ET.SubElement(element, "sample", attrib)
    return element


def save_dives(path, dives):
    root = ET.Element("dives")
    for dive in dives:
        root.append(dive_element(dive))
    ET.indent(root)
    ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)
    logger.info(f"wrote {len(root)} dives to {path}")

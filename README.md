# sysstat

Read-only Linux system statistics, taken straight from `/proc` and `/sys`:

- memory usage from `/proc/meminfo` (`sysstat.meminfo`)
- power supplies and batteries from `/sys/class/power_supply` (`sysstat.power_supply`, `sysstat.battery`)
- backlights from `/sys/class/backlight`, including a watcher that reports changes as they happen (`sysstat.backlight`)
- user, primary group and host name information (`sysstat.user`)

Every reader takes the file or directory to read as an optional argument, so
it can be pointed at a copy of `/proc` or `/sys` as well as at the real thing.

## Installation

```
pip install sysstat
```

## Reading single-line files

```python
from sysstat.lib import path_read_str, path_read_int, scan_file

status = path_read_str("/sys/class/power_supply/BAT0/status")
capacity = path_read_int("/sys/class/power_supply/BAT0/capacity")
```

`path_read_str` returns the file's contents with the final character (the
trailing newline) removed, and raises `ValueError` for an empty file.
`path_read_int` also requires the contents to be a plain decimal integer and
raises `ValueError` otherwise.

`scan_file(path, parser)` calls `parser` with each line of a file, line
terminator removed, and stops as soon as `parser` returns a false value.

## Memory

```python
from sysstat.meminfo import read_meminfo

info = read_meminfo()  # defaults to /proc/meminfo
values = info.populate(["MemTotal", "MemFree", "Buffers", "Cached"])
used = values["MemTotal"] - values["MemFree"] - values["Buffers"] - values["Cached"]
print(f"Used memory: {used / values['MemTotal'] * 100:g}%")
```

`read_meminfo` raises `ValueError` on a malformed line. `MemInfo.populate`
returns a dict of the requested keys and raises `MissingKeyError` (a
`LookupError`, with the absent names in its `missing` attribute) if any are
absent. Single values are available through `info.key("MemTotal")` or methods
such as `info.mem_total()`, `info.swap_free()` or `info.huge_pages_total()`;
these return `None` for a key the file does not have. The parsed values are
held, read-only, in `info.info`.

## Power supplies and batteries

```python
from sysstat.power_supply import power_supply, power_supplies
from sysstat.battery import battery, batteries

adapter = power_supply("ADP0")
print(adapter.type())

for supply in power_supplies("*"):
    print(supply.name())

bat = battery("BAT0")
print(bat.capacity(), bat.status())

for bat in batteries():
    print(bat.name())
```

Values come from each device's `uevent` file, as strings. Accessors such as
`manufacturer()`, `model_name()`, `serial_number()`, `type()` and `name()` on
`PowerSupplyInfo`, and `status()`, `capacity()`, `energy_now()` and the like
on `BatteryInfo`, return `None` when the key is absent. `key()` gives access to
any uevent key, and `populate()` raises `MissingUeventKeyError` for absent
keys. `batteries()` reads every device whose name matches `BAT*`. Each reader
takes the directory to read from as `root`, defaulting to
`/sys/class/power_supply`; devices are returned in sorted name order.

## Backlights

```python
from sysstat.backlight import backlight, backlights, BacklightWatcher

info = backlight("intel_backlight")
print(f"Brightness: {info.brightness / info.max_brightness * 100:g}%")

for info in backlights("*"):
    print(info.name, info.brightness)

with BacklightWatcher("*") as watcher:
    for info in watcher:
        print(info.name, info.brightness / info.max_brightness * 100)
```

`BacklightInfo` is a frozen dataclass with `name`, `type`, `bl_power`,
`brightness`, `actual_brightness` and `max_brightness`. The watcher first
yields the current state of every matching backlight and then a fresh
snapshot each time one of its attribute files is written. An error while
re-reading a file is raised from the iteration; iteration ends once the
watcher is closed (by `close()` or by leaving the `with` block) and the
pending states have been consumed. The default root is `/sys/class/backlight`.

## Users

```python
from sysstat.user import current_user, lookup_user, lookup_user_id

print(current_user().username)
print(lookup_user("root").uid)
print(lookup_user_id("0").group)
```

`UserInfo` carries `uid`, `gid`, `username`, `group` (the primary group's
name) and `hostname`. Unknown users raise `UnknownUserError`; a uid that is
not a number raises `ValueError`.

## What it does not do

The package only reads. It never writes to `/sys` (it cannot set brightness,
for example), and it offers no command-line program: it is a library to be
called from your own code.
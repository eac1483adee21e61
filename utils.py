def format_device_list(devices):
    """One describe() line per device, in order"""
    return [d.describe() for d in devices]


def print_devices(devices, title=None):
    """Print devices one per line, optionally after a title line"""
    if title:
        print(title)
    for line in format_device_list(devices):
        print(line)

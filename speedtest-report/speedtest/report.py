"""
Text report for speedtest results.

Sections are written in a fixed order (network, drive, object, client, site
replication) and only when present. Columns are tab separated.
"""

import io

from configuration import CHECK_MARK, PRODUCT_NAME, UNIT_BASE, UNIT_LABELS


def render(result, unit_base: int = UNIT_BASE) -> str:
    """Render ``result`` as report text.

    Args:
        result: Parsed speedtest result
        unit_base: 1024 for GiB/MiB, 1000 for GB/MB

    Returns:
        The report, or an empty string if no section is present
    """
    labels = UNIT_LABELS[unit_base]
    gib = labels["gib"]
    mib = labels["mib"]
    buf = io.StringIO()
    drive_count = 0

    if result.network.is_present():
        _section_header(buf, "NetPerf")
        print("NODE\t\t\t\tRX\t\tTX", file=buf)
        for server in result.network.servers:
            print(
                f"{server.endpoint}\t"
                f"{server.perf.rx_bps().gib(unit_base):.1f} {gib}/s\t"
                f"{server.perf.tx_bps().gib(unit_base):.1f} {gib}/s",
                file=buf,
            )
        print("", file=buf)

    if result.drive.is_present():
        _section_header(buf, "DrivePerf")
        print("NODE\t\t\t\tPATH\t\t\tREAD\t\tWRITE", file=buf)
        for server in result.drive.servers:
            for disk in server.disks:
                drive_count += 1
                print(
                    f"{server.endpoint}\t{disk.path}\t"
                    f"{disk.read_throughput.mib(unit_base):.0f} {mib}/s\t"
                    f"{disk.write_throughput.mib(unit_base):.0f} {mib}/s",
                    file=buf,
                )
        print("", file=buf)

    if result.object.is_present():
        obj = result.object
        _section_header(buf, "ObjectPerf")
        print("   \tTHROUGHPUT\tIOPS", file=buf)
        for name, operation in (("PUT", obj.put), ("GET", obj.get)):
            print(
                f"{name}\t{operation.perf.throughput.gib(unit_base):.1f} {gib}/s\t"
                f"{operation.perf.objects_per_sec} objs/s",
                file=buf,
            )
        print("", file=buf)
        print(
            f"{PRODUCT_NAME} {result.version}, "
            f"{len(result.network.servers)} servers, "
            f"{drive_count} drives, "
            f"{obj.object_size.mib(unit_base):.0f} {mib} objects, "
            f"{obj.threads} threads",
            file=buf,
        )
        print("", file=buf)

    if result.client.is_present():
        _section_header(buf, "Client")
        print("ENDPOINT\t\t\t\t\tTX", file=buf)
        print(
            f"{result.client.endpoint}\t"
            f"{result.client.throughput().mib(unit_base):.1f} {mib}/s",
            file=buf,
        )

    if result.site_replication.is_present():
        _section_header(buf, "SiteReplication")
        print("ENDPOINT\t\tRX\t\tTX", file=buf)
        for site in result.site_replication.servers:
            print(
                f"{site.endpoint}\t"
                f"{site.perf.rx_bps().mib(unit_base):.1f} {mib}/s\t"
                f"{site.perf.tx_bps().mib(unit_base):.1f} {mib}/s",
                file=buf,
            )
        print("", file=buf)

    return buf.getvalue()


def _section_header(buf, name: str) -> None:
    print(f"{name}: {CHECK_MARK}", file=buf)
    print("", file=buf)

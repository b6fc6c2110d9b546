"""Memory usage information from /proc/meminfo."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sysstat.lib import PathLike, _atoi, scan_file

MEMINFO_PATH = "/proc/meminfo"


class MissingKeyError(LookupError):
    """Raised when requested meminfo keys are absent."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"{', '.join(self.missing)}: missing MemInfo key(s)")


@dataclass(frozen=True)
class MemInfo:
    """Parsed contents of a meminfo file; values as reported (usually kB)."""

    info: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def key(self, key: str) -> int | None:
        """Return the value for ``key``, or None if it is absent."""
        return self.info.get(key)

    def populate(self, keys: Iterable[str]) -> dict[str, int]:
        """Return a mapping of each requested key to its value.

        Raises MissingKeyError naming every key that is absent.
        """
        keys = list(keys)
        missing = [k for k in keys if k not in self.info]
        if missing:
            raise MissingKeyError(missing)
        return {k: self.info[k] for k in keys}

    def mem_total(self) -> int | None:
        """Total usable RAM."""
        return self.key("MemTotal")

    def mem_free(self) -> int | None:
        """Sum of LowFree and HighFree."""
        return self.key("MemFree")

    def mem_available(self) -> int | None:
        """Estimate of memory available for new applications without swapping."""
        return self.key("MemAvailable")

    def buffers(self) -> int | None:
        """Temporary storage for raw disk blocks."""
        return self.key("Buffers")

    def cached(self) -> int | None:
        """Page cache, excluding SwapCached."""
        return self.key("Cached")

    def swap_cached(self) -> int | None:
        """Memory swapped back in that is still in the swap file."""
        return self.key("SwapCached")

    def active(self) -> int | None:
        """Recently used memory, rarely reclaimed."""
        return self.key("Active")

    def inactive(self) -> int | None:
        """Less recently used memory, eligible for reclaim."""
        return self.key("Inactive")

    def active_anon(self) -> int | None:
        """The "Active(anon)" value."""
        return self.key("Active(anon)")

    def inactive_anon(self) -> int | None:
        """The "Inactive(anon)" value."""
        return self.key("Inactive(anon)")

    def active_file(self) -> int | None:
        """The "Active(file)" value."""
        return self.key("Active(file)")

    def inactive_file(self) -> int | None:
        """The "Inactive(file)" value."""
        return self.key("Inactive(file)")

    def unevictable(self) -> int | None:
        """The "Unevictable" value."""
        return self.key("Unevictable")

    def mlocked(self) -> int | None:
        """The "Mlocked" value."""
        return self.key("Mlocked")

    def high_total(self) -> int | None:
        """Total amount of highmem."""
        return self.key("HighTotal")

    def high_free(self) -> int | None:
        """Free highmem."""
        return self.key("HighFree")

    def low_total(self) -> int | None:
        """Total amount of lowmem."""
        return self.key("LowTotal")

    def low_free(self) -> int | None:
        """Free lowmem."""
        return self.key("LowFree")

    def mmap_copy(self) -> int | None:
        """The "MmapCopy" value."""
        return self.key("MmapCopy")

    def swap_total(self) -> int | None:
        """Total swap space."""
        return self.key("SwapTotal")

    def swap_free(self) -> int | None:
        """Unused swap space."""
        return self.key("SwapFree")

    def dirty(self) -> int | None:
        """Memory waiting to be written back to disk."""
        return self.key("Dirty")

    def writeback(self) -> int | None:
        """Memory actively being written back to disk."""
        return self.key("Writeback")

    def anon_pages(self) -> int | None:
        """Non-file backed pages mapped into user-space page tables."""
        return self.key("AnonPages")

    def mapped(self) -> int | None:
        """Files mapped into memory, such as libraries."""
        return self.key("Mapped")

    def shmem(self) -> int | None:
        """Memory consumed in tmpfs filesystems."""
        return self.key("Shmem")

    def k_reclaimable(self) -> int | None:
        """Kernel allocations reclaimable under memory pressure."""
        return self.key("KReclaimable")

    def slab(self) -> int | None:
        """In-kernel data structures cache."""
        return self.key("Slab")

    def s_reclaimable(self) -> int | None:
        """Reclaimable part of Slab."""
        return self.key("SReclaimable")

    def s_unreclaim(self) -> int | None:
        """Unreclaimable part of Slab."""
        return self.key("SUnreclaim")

    def kernel_stack(self) -> int | None:
        """Memory allocated to kernel stacks."""
        return self.key("KernelStack")

    def page_tables(self) -> int | None:
        """Memory dedicated to the lowest level of page tables."""
        return self.key("PageTables")

    def quicklists(self) -> int | None:
        """The "Quicklists" value."""
        return self.key("Quicklists")

    def nfs_unstable(self) -> int | None:
        """NFS pages sent to the server but not yet committed."""
        return self.key("NFS_Unstable")

    def bounce(self) -> int | None:
        """Memory used for block device bounce buffers."""
        return self.key("Bounce")

    def writeback_tmp(self) -> int | None:
        """Memory used by FUSE for temporary writeback buffers."""
        return self.key("WritebackTmp")

    def commit_limit(self) -> int | None:
        """Total memory currently available to be allocated."""
        return self.key("CommitLimit")

    def committed_as(self) -> int | None:
        """Memory presently allocated on the system."""
        return self.key("Committed_AS")

    def vmalloc_total(self) -> int | None:
        """Total size of the vmalloc area."""
        return self.key("VmallocTotal")

    def vmalloc_used(self) -> int | None:
        """Used vmalloc area."""
        return self.key("VmallocUsed")

    def vmalloc_chunk(self) -> int | None:
        """Largest contiguous free block of vmalloc area."""
        return self.key("VmallocChunk")

    def hardware_corrupted(self) -> int | None:
        """The "HardwareCorrupted" value."""
        return self.key("HardwareCorrupted")

    def lazy_free(self) -> int | None:
        """Memory marked by madvise MADV_FREE."""
        return self.key("LazyFree")

    def anon_huge_pages(self) -> int | None:
        """Non-file backed huge pages mapped into user space."""
        return self.key("AnonHugePages")

    def shmem_huge_pages(self) -> int | None:
        """Shared memory and tmpfs allocated with huge pages."""
        return self.key("ShmemHugePages")

    def shmem_pmd_mapped(self) -> int | None:
        """Shared memory mapped into user space with huge pages."""
        return self.key("ShmemPmdMapped")

    def cma_total(self) -> int | None:
        """Total CMA pages."""
        return self.key("CmaTotal")

    def cma_free(self) -> int | None:
        """Free CMA pages."""
        return self.key("CmaFree")

    def huge_pages_total(self) -> int | None:
        """Size of the pool of huge pages."""
        return self.key("HugePages_Total")

    def huge_pages_free(self) -> int | None:
        """Huge pages in the pool not yet allocated."""
        return self.key("HugePages_Free")

    def huge_pages_rsvd(self) -> int | None:
        """Huge pages committed to but not yet allocated."""
        return self.key("HugePages_Rsvd")

    def huge_pages_surp(self) -> int | None:
        """Surplus huge pages above nr_hugepages."""
        return self.key("HugePages_Surp")

    def hugepagesize(self) -> int | None:
        """Size of huge pages."""
        return self.key("Hugepagesize")

    def direct_map_4k(self) -> int | None:
        """RAM linearly mapped by the kernel in 4 kB pages."""
        return self.key("DirectMap4k")

    def direct_map_4m(self) -> int | None:
        """RAM linearly mapped by the kernel in 4 MB pages."""
        return self.key("DirectMap4M")

    def direct_map_2m(self) -> int | None:
        """RAM linearly mapped by the kernel in 2 MB pages."""
        return self.key("DirectMap2M")

    def direct_map_1g(self) -> int | None:
        """RAM linearly mapped by the kernel in 1 GB pages."""
        return self.key("DirectMap1G")


def read_meminfo(path: PathLike = MEMINFO_PATH) -> MemInfo:
    """Parse a meminfo file into a MemInfo.

    Raises ValueError on a malformed line.
    """
    values: dict[str, int] = {}

    def parse(line: str) -> bool:
        fields = line.split()
        if len(fields) not in (2, 3):
            raise ValueError(f"{path}: invalid meminfo format")
        values[fields[0][:-1]] = _atoi(fields[1])
        return True

    scan_file(path, parse)
    return MemInfo(values)
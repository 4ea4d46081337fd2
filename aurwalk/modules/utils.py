import os

SIZE_UNITS = ["B", "KiB", "MiB", "GiB", "TiB"]


class Utils:
    """
    Filesystem helpers shared by the fetcher and the cache sweeper.
    """

    @staticmethod
    def ensure_dir(path):
        os.makedirs(path, exist_ok=True)
        return path

    @staticmethod
    def list_subdirs(path):
        """
        Sorted names of the directories directly under path ([] when path is missing).
        """
        if not os.path.isdir(path):
            return []
        return sorted(d for d in os.listdir(path) if os.path.isdir(os.path.join(path, d)))

    @staticmethod
    def dir_size(path):
        """
        Total size in bytes of the regular files below path; symlinks are not followed.
        """
        total = 0
        for root, _, files in os.walk(path):
            for fn in files:
                fp = os.path.join(root, fn)
                if os.path.islink(fp):
                    continue
                try:
                    total += os.path.getsize(fp)
                except OSError:
                    continue
        return total

    @staticmethod
    def format_size(num_bytes):
        """
        Human readable binary size: 0 -> '0 B', 1536 -> '1.5 KiB'.
        """
        size = float(num_bytes)
        for unit in SIZE_UNITS:
            if abs(size) < 1024 or unit == SIZE_UNITS[-1]:
                if unit == "B":
                    return f"{int(size)} B"
                return f"{size:.1f} {unit}"
            size /= 1024

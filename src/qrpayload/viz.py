from __future__ import annotations
from .models.segment import DecodedPayload

_COLORS = {
    "NUMERIC": "tab:blue",
    "ALPHANUMERIC": "tab:orange",
    "BYTE": "tab:green",
    "KANJI": "tab:red",
}

def plot_segments(payload: DecodedPayload, total_bits: int | None = None):
    """Bit-span bar of each decoded segment for sanity-checking a payload."""
    import matplotlib.pyplot as plt
    fig, ax = plt.subplots(figsize=(10, 1.8))
    for seg in payload.segments:
        ax.broken_barh([(seg.bit_offset, seg.bit_length)], (0, 1),
                       facecolors=_COLORS.get(seg.mode, "tab:gray"))
        ax.text(seg.bit_offset + seg.bit_length / 2, 0.5, f"{seg.mode[:1]}{seg.count}",
                ha="center", va="center", fontsize=8)
    if total_bits:
        ax.set_xlim(0, total_bits)
    ax.set_yticks([])
    ax.set_xlabel("Bit offset")
    ax.set_title("QR payload segments")
    plt.show()
    return fig

"""Demo script: render a few identicons and show them with matplotlib."""

import hashlib

import matplotlib.pyplot as plt

from hashicon import render_raster, render_vector

NAMES = ["alice@example.com", "bob@example.com", "carol@example.com", "dave"]


def main():
    fig, axes = plt.subplots(1, len(NAMES), figsize=(2 * len(NAMES), 2.4))
    for ax, name in zip(axes, NAMES):
        digest = hashlib.sha1(name.encode()).digest()
        vector = render_vector(digest, 64)
        print(f"{name}: {len(vector.paths)} colour(s)")
        for colour, d in vector.paths.items():
            print(f"  {colour}: {d[:60]}...")

        ax.imshow(render_raster(digest, 64))
        ax.set_title(name, fontsize=8)
        ax.set_axis_off()

    fig.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()

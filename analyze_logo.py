import numpy as np

from process_logo import load_logo


def longest_run(row):
    best = 0
    current = 0
    for visible in row:
        current = current + 1 if visible else 0
        best = max(best, current)
    return best


def analyze_processed_logo(input_path, threshold=5):
    img = load_logo(input_path)
    data = np.array(img)
    alpha = data[:, :, 3]

    # Threshold 5 ignores the faintest antialiased edge pixels
    mask = alpha > threshold
    h, w = mask.shape

    print(f"Analyzing {input_path} ({w}x{h})...")

    if np.any(mask):
        ys, xs = np.nonzero(mask)
        bbox = (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))
    else:
        bbox = None
        print("Image appears fully transparent.")

    white = np.all(data == 255, axis=2)
    corners = [alpha[0, 0], alpha[0, w - 1], alpha[h - 1, 0], alpha[h - 1, w - 1]]

    report = {
        'size': (w, h),
        'square': w == h,
        'bbox': bbox,
        'circle_diameter': longest_run(mask[h // 2]),
        'opaque_white': int(white.sum()),
        'corners_transparent': all(int(a) == 0 for a in corners),
    }

    print(f"Size: {w}x{h} | Square: {report['square']}")
    print(f"Visible BBox: {bbox} (x1, y1, x2, y2)")
    print(f"Circle diameter (middle row): {report['circle_diameter']} px")
    print(f"Opaque white pixels: {report['opaque_white']}")
    print(f"Corners transparent: {report['corners_transparent']}")
    return report


if __name__ == "__main__":
    analyze_processed_logo('public/images/logo-processed.png')

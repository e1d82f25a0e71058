"""
Simple example of decoding an image and running it through an OCIO transform
"""

from pathlib import Path

import numpy as np

from crispen_bridge import color, image


def main():
    # Replace with actual image path
    image_path = Path("example.png")
    
    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return
    
    config = color.create_config_from_builtin("ocio://default")
    if config is None:
        print(f"✗ Config failed: {color.get_last_error()}")
        return
    
    transform = color.resolve_by_names(config, "sRGB - Texture", "ACEScg")
    evaluator = color.compile_evaluator(transform)
    # The evaluator no longer needs either of these
    color.destroy_transform(transform)
    color.destroy_config(config)
    if evaluator is None:
        print(f"✗ Transform failed: {color.get_last_error()}")
        return
    
    handle = image.open_image(image_path)
    if handle is None:
        print(f"✗ Failed: {image.get_last_error()}")
        return
    
    width = image.image_width(handle)
    height = image.image_height(handle)
    print(f"Dimensions:     {width}x{height}px")
    print(f"Channels:       {image.image_channel_count(handle)}")
    print(f"Bit depth:      {image.image_bit_depth(handle).value}")
    print(f"Color space:    {image.image_color_space(handle) or '(none)'}")
    
    pixels = np.empty(width * height * 4, dtype=np.float32)
    if not image.read_rgba_float32(handle, pixels, pixels.size):
        print(f"✗ Failed: {image.get_last_error()}")
        return
    image.destroy_image(handle)
    
    if not color.is_noop(evaluator):
        color.apply_batch_rgba(evaluator, pixels, width, height)
    
    rgba = pixels.reshape(height, width, 4)
    print(f"\nACEScg mean:    {rgba[..., :3].mean(axis=(0, 1))}")
    color.destroy_evaluator(evaluator)


if __name__ == "__main__":
    main()

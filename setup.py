from setuptools import setup

setup(
    name="wp-update-version",
    version="0.1.0",
    package_dir={"": "src"},
    py_modules=["wp_update_version", "wpuv_files", "wpuv_rewrite"],
    entry_points={"console_scripts": ["wp-update-version=wp_update_version:main"]},
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
)

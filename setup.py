from setuptools import find_packages, setup

setup(
    name="media-library-summary",
    version="0.1.0",
    description="Markdown content summary of image metadata grouped by file type",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "Pillow",
        "piexif",
    ],
    extras_require={
        "heif": ["pillow-heif"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "media-library-summary=media_library_summary.main:main",
        ],
    },
)

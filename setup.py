from setuptools import find_packages, setup

package_name = "se3cov"

setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    data_files=[
        (
            "share/" + package_name + "/config",
            [
                "config/se3cov_base.yaml",
            ],
        ),
    ],
    python_requires=">=3.10",
    install_requires=["setuptools", "numpy", "pyyaml", "pydantic>=2"],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    maintainer="you",
    maintainer_email="you@example.com",
    description="Second- and fourth-order Gaussian uncertainty compounding on SE(3)",
    license="Apache-2.0",
)

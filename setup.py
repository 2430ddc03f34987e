from setuptools import setup

description = 'Compute the position of the sun and related radiometric quantities for a location and local time.'
long_description = """The NOAA low-precision solar position algorithm: solar declination, equation of time, hour-angle,
zenith and azimuth angles with optional refraction correction, air mass, extraterrestrial irradiance and the times of
solar noon, sunrise and sunset for a location and local time."""

setup(
    name='solarcalc',
    version='0.1.0',
    author="Quinton Barnes",
    author_email="devqbizzle68@gmail.com",
    description=description,
    long_description=long_description,
    long_description_content_type='text/plain',
    license='MIT',
    python_requires='>=3.10',
    install_requires=['pyevspace>=0.0.12.4,<0.14'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy',
        'Topic :: Scientific/Engineering :: Atmospheric Science'
    ],
    packages=['solarcalc', 'solarcalc.core', 'solarcalc.sun', 'solarcalc.util'],
    package_dir={'': 'src'},
)

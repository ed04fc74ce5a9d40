from setuptools import setup, find_packages
import befunge93


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='befunge93',
    description="A befunge-93 interpreter implemented in pure Python",
    long_description=long_description,
    version=befunge93.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    entry_points={
        'console_scripts': [
            'befunge-dbg = befunge93.cli.dbg:dbg',
            'befunge-run = befunge93.cli.run:run',
        ]
    },
    license='BSD',
    python_requires='>=3.5',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)

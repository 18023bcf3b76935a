"""Build JVM launch command lines with classpath spilling for long classpaths."""

__version__ = "0.3.1"

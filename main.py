import argparse
from carfleet.seeder import add_cars_to_firestore

def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the Firestore 'cars' collection with sample cars")
    parser.parse_args(argv)

    # Failures are reported by the seeder; exit code stays 0 either way.
    add_cars_to_firestore()

if __name__ == '__main__':
    main()

import copy

# Sample fleet. Keys are stored in Firestore as-is (camelCase).
CARS = [
    {
        'model': 'Tesla Model 3',
        'distance': 15.5,
        'fuelCapacity': 100.0,
        'pricePerHour': 25.0
    },
    {
        'model': 'Toyota Camry',
        'distance': 20.0,
        'fuelCapacity': 60.0,
        'pricePerHour': 15.0
    },
    {
        'model': 'Honda Civic',
        'distance': 18.0,
        'fuelCapacity': 50.0,
        'pricePerHour': 12.0
    },
    {
        'model': 'BMW X5',
        'distance': 25.0,
        'fuelCapacity': 80.0,
        'pricePerHour': 30.0
    },
    {
        'model': 'Mercedes-Benz E-Class',
        'distance': 22.0,
        'fuelCapacity': 70.0,
        'pricePerHour': 35.0
    }
]

CAR_FIELDS = ('model', 'distance', 'fuelCapacity', 'pricePerHour')

def get_cars():
    """Fresh copies of the fleet records."""
    return copy.deepcopy(CARS)

"""Built-in demo data in wire format (same shape as the REST API)."""

DEMO_SEED = {
    "users": [
        {
            "id": "admin-1",
            "name": "Admin User",
            "role": "admin",
            "jobProfile": "Manager",
            "salaryType": "monthly",
            "salaryAmount": 50000,
            "status": "active",
        },
        {
            "id": "emp-1",
            "name": "Sunita Sharma",
            "role": "employee",
            "jobProfile": "Tailor",
            "salaryType": "piece_rate",
            "salaryAmount": 0,
            "status": "active",
        },
        {
            "id": "emp-2",
            "name": "Ramesh Kumar",
            "role": "employee",
            "jobProfile": "Cutter",
            "salaryType": "daily",
            "salaryAmount": 800,
            "status": "active",
        },
        {
            "id": "emp-3",
            "name": "Anil Verma",
            "role": "employee",
            "jobProfile": "Helper",
            "salaryType": "daily",
            "salaryAmount": 500,
            "status": "terminated",
        },
    ],
    "attendance": [
        {
            "id": "att-1",
            "userId": "emp-1",
            "date": "2024-07-27",
            "timestamp": "2024-07-27T09:02:11+00:00",
            "status": "approved",
        },
        {
            "id": "att-2",
            "userId": "emp-2",
            "date": "2024-07-27",
            "timestamp": "2024-07-27T09:15:40+00:00",
            "status": "pending",
        },
    ],
    "inventory": [
        {"id": "TRK-1001", "name": "Cotton Kurta", "color": "Blue", "sizes": {"S": 10, "M": 20, "L": 5}},
        {"id": "TRK-1002", "name": "Denim Shirt", "color": "Black", "sizes": {"M": 12, "L": 8, "XL": 3}},
    ],
}

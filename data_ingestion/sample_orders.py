"""
File: data_ingestion/sample_orders.py
Purpose:
    Built-in orders dataset shown when the configured CSV source cannot be
    read. Goes through the same ingest() path as any other CSV text.
"""

SAMPLE_ORDERS_CSV = """name,segment,state,city,order_date,ship_mode,sales
John Doe,Consumer,California,Los Angeles,2023-01-15,Standard,150.50
Jane Smith,Corporate,Texas,Houston,2023-02-20,Express,299.99
Bob Johnson,Home Office,Florida,Miami,2023-03-10,Standard,89.99
Alice Brown,Consumer,New York,New York,2023-04-05,Express,450.00
Mike Wilson,Corporate,California,San Francisco,2023-05-20,Standard,199.99
Sarah Davis,Home Office,Texas,Austin,2023-06-15,Express,350.75
Tom Miller,Consumer,Illinois,Chicago,2023-07-10,Standard,125.00
Emily Taylor,Corporate,Florida,Orlando,2023-08-05,Express,275.50
David Anderson,Home Office,Washington,Seattle,2023-09-20,Standard,189.99
Lisa Martinez,Consumer,California,San Diego,2023-10-15,Express,420.00
James Wilson,Corporate,Texas,Houston,2022-11-10,Standard,230.00
Emma Thompson,Home Office,New York,Buffalo,2022-12-05,Express,310.50
Robert Garcia,Consumer,Illinois,Chicago,2022-01-20,Standard,95.99
Olivia Lee,Corporate,Florida,Tampa,2022-02-15,Express,280.00
William Harris,Home Office,California,Los Angeles,2022-03-10,Standard,175.50
"""
